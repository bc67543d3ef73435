import matplotlib.pyplot as plt
import numpy as np

class PerformanceDisplay:
    def __init__(self, logs, 
                 fig_size=(10, 6), dpi=100, font_size=12, 
                 dot_size=20, dot_alpha=0.6,
                 dot_color='blue',
                 trend_line_color='red', trend_line_linewidth=2,
                 moving_avg_window=10):
        self.logs = logs
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.dot_size = dot_size
        self.dot_alpha = dot_alpha
        self.dot_color = dot_color
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth
        self.moving_avg_window = moving_avg_window

    def _moving_average(self, data):
        window = self.moving_avg_window
        if window < 1:
            raise ValueError("moving_avg_window must be at least 1")
        return np.convolve(data, np.ones(window) / window, mode='same')

    def _finish(self, title, xlabel, ylabel, show_graph, save_path):
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()
    
    def _plot_graph(self, y_values, title, xlabel, ylabel, show_graph = False, save_path=None):
        if not y_values:
            print(f"No data available for {title}.")
            return False
        
        x = np.arange(1, len(y_values) + 1)
        y = np.array(y_values)
        trend = self._moving_average(y)
        
        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.scatter(x, y, s=self.dot_size, alpha=self.dot_alpha, color=self.dot_color, label="Data points")
        plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Moving Average Trend")
        self._finish(title, xlabel, ylabel, show_graph, save_path)
        return True

    def generate_code_length_plot(self, show_graphs = False, save_path=None):
        """Code length of each symbol against its frequency, from CodeAssignmentLog entries."""
        points = [(log.frequency, len(log.code)) for log in self.logs if hasattr(log, 'code') and hasattr(log, 'frequency')]
        if not points:
            print("No data available for Code Length by Frequency.")
            return False

        points.sort()
        frequencies = np.array([p[0] for p in points])
        lengths = np.array([p[1] for p in points])

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.scatter(frequencies, lengths, s=self.dot_size, alpha=self.dot_alpha, color=self.dot_color, label="Symbols")
        plt.step(frequencies, lengths, where='post', color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Code length")
        plt.xscale('log')
        self._finish("Code Length by Frequency", "Frequency", "Code length (bits)", show_graphs, save_path)
        return True

    def generate_coding_log_plot(self, show_graphs = False, save_path=None):
        values = [log.encoded_size for log in self.logs if hasattr(log, 'encoded_size')]
        return self._plot_graph(values, "Encoded Symbol Size", "Log Entry Order", "Bits", show_graphs, save_path)
