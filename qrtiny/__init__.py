import logging

from .errors import DecodeError, InvalidLength, QRError
from .mask import MaskPolicy
from .qr import QRCode, encode
from .reader import read

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['QRCode', 'MaskPolicy', 'encode', 'read', 'QRError', 'InvalidLength', 'DecodeError']
