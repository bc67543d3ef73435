"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Any, Union, Optional

from .settings import PREPROCESSOR_STEP_INTERVAL_COUNT, CODING_STEP_INTERVAL_COUNT

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3 


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()
        
    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"
    
    def __repr__(self) -> str:
        return self.__str__()


class FrequencyCountLog(Log):
    def __init__(self, symbol_count: int, alphabet_size: int) -> None:
        self.symbol_count = symbol_count
        self.alphabet_size = alphabet_size
        super().__init__("Frequency_count_log", LogLevel.INFO, f"Symbols: {symbol_count}, Alphabet size: {alphabet_size}")


class TreeMergeLog(Log):
    def __init__(self, left_frequency: int, right_frequency: int) -> None:
        self.left_frequency = left_frequency
        self.right_frequency = right_frequency
        self.frequency = left_frequency + right_frequency
        super().__init__("Tree_merge_log", LogLevel.INFO,
                         f"Left: {left_frequency}, Right: {right_frequency}, Merged: {self.frequency}")


class CodeAssignmentLog(Log):
    def __init__(self, symbol: Any, code: str, frequency: int) -> None:
        self.symbol = symbol
        self.code = code
        self.frequency = frequency
        super().__init__("Code_assignment_log", LogLevel.INFO, f"Symbol: {symbol!r}, Code: {code}, Frequency: {frequency}")


class CodingLog(Log):
    def __init__(self, symbol_size: int, encoded_size: int) -> None:
        self.symbol_size = symbol_size
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol size: {symbol_size}, Encoded size: {encoded_size}")


class PreprocessingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Preprocessing_progress_step", LogLevel.PROGRESS, message)


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class DecodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Decoding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.preproc_progress_count = 0
        self.coding_progress_count = 0
        self.decoding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.save_info = True
        self.save_warning = True
        self.save_error = True
        self.save_progress = False

        self.preprocessor_step_interval_count = PREPROCESSOR_STEP_INTERVAL_COUNT
        self.coding_step_interval_count = CODING_STEP_INTERVAL_COUNT
        self.decoding_step_interval_count = CODING_STEP_INTERVAL_COUNT

    def _progress(self, log: Log, count: int, interval: int) -> None:
        if log.total_steps is not None:
            log.message = f"{log.base_message} ({count}/{log.total_steps})"
        else:
            log.message = f"{log.base_message} ({count})"
        if self.record_progress:
            self.logs.append(log)
        if self.display_progress and (count % interval == 0):
            print(log)

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)
        
        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, PreprocessingProgressStep):
                self.preproc_progress_count += 1
                self._progress(log, self.preproc_progress_count, self.preprocessor_step_interval_count)
            elif isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                self._progress(log, self.coding_progress_count, self.coding_step_interval_count)
            elif isinstance(log, DecodingProgressStep):
                self.decoding_progress_count += 1
                self._progress(log, self.decoding_progress_count, self.decoding_step_interval_count)

    def _should_save(self, log: Log) -> bool:
        if log.level == LogLevel.INFO:
            return self.save_info
        if log.level == LogLevel.WARNING:
            return self.save_warning
        if log.level == LogLevel.ERROR:
            return self.save_error
        return self.save_progress

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                if self._should_save(log):
                    file.write(str(log) + "\n")
