class DiagramError(Exception):
    pass


class ConfigurationError(DiagramError):
    pass


class LayoutOverflowError(DiagramError):
    pass


class LexicalAnomaly(DiagramError):
    pass


class DiagramSyntaxError(DiagramError):

    def __init__(self, message: str, token=None):
        super().__init__(message)
        self.token = token


class UnsupportedConstructError(DiagramSyntaxError):

    def __init__(self, keyword: str, token=None):
        super().__init__(f"'{keyword}' blocks are not supported.", token)
        self.keyword = keyword
