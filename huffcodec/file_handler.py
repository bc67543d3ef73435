#file_handler.py
from .settings import FILE_SIGNATURE, VERSION

class CompressedFile:
    def __init__(self):
        self.file_signature = FILE_SIGNATURE
        self.version = VERSION

    def write(self, file_path, data):
        with open(file_path, 'wb') as file:
            file.write(self.file_signature)
            #write the version in 2 bytes
            file.write(self.version.to_bytes(2, 'big'))
            #write the data
            file.write(data)

    def read(self, file_path):
        with open(file_path, 'rb') as file:
            #check the signature
            if file.read(len(self.file_signature)) != self.file_signature:
                raise ValueError("Invalid file signature")
            #read the version
            file_version = int.from_bytes(file.read(2), 'big')
            if file_version != self.version:
                raise ValueError("incompatible version")
            #read the data
            data = file.read()
        return file_version, data
