from .constants import MAX_LENGTH


class QRError(Exception):
    pass


class InvalidLength(QRError, ValueError):
    # raised by the message encoder before any other stage runs
    def __init__(self, length):
        self.length = length
        super().__init__(
            'message must be 1 to %d bytes long, got %d' % (MAX_LENGTH, length))


class DecodeError(QRError):
    pass
