class BracketColorizerError(Exception):
    pass


class ColorSchemeError(BracketColorizerError, ValueError):
    pass


class SettingsError(BracketColorizerError):
    pass


class TransportError(BracketColorizerError):
    pass
