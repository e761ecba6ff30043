# nexergy/utils/errors.py
class NexergyError(RuntimeError):
    """
    Root of every error raised by nexergy itself.
    """


class SchemaError(NexergyError):
    """
    Raised when a required column is missing or has the wrong type.
    Fatal: aborts the pipeline.
    """


class ConfigError(NexergyError):
    """
    Raised for invalid caller-provided parameters
    (empty feature list, negative learning rate / epochs / lags, ...).
    """


class StorageError(NexergyError):
    """
    Raised when no input records can be found.
    """
