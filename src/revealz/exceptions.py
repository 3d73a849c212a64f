class RevealzError(Exception):
    pass


class AssemblyError(RevealzError):
    pass


class InvalidLineSliceError(AssemblyError):
    pass


class SettingsError(RevealzError):
    pass
