class ProjectStatusError(Exception):
    pass


class InvalidInputError(ProjectStatusError):
    pass


class UnsupportedOwnerTypeError(ProjectStatusError):
    pass


class StatusNotFoundError(ProjectStatusError):
    pass


class MalformedFieldSettingsError(ProjectStatusError):
    pass


class TransportError(ProjectStatusError):
    pass
