class CodecError(ValueError):
    """Base class for every failure raised by the codec."""

class EmptyInput(CodecError):
    pass

class TruncatedHeader(CodecError):
    pass

class CorruptHeader(CodecError):
    pass

class UnknownContext(CodecError):
    pass

class BitstreamExhausted(CodecError, EOFError):
    pass
