"""Exceptions raised while fetching and parsing the CMS data set.

Every exception here is fatal for the whole initialization. Unparseable
tri-state values are not errors: they are logged and parsing continues.
"""


class CmsDataError(Exception):
    """Base class for all CMS data set failures."""


class ResourceError(CmsDataError):
    """Failure retrieving or decoding a single resource."""

    def __init__(self, resource: str, message: str) -> None:
        super().__init__(message)
        self.resource = resource


class ResourceTransportError(ResourceError):
    """The fetch itself failed (network, DNS, missing file)."""

    def __init__(self, resource: str, cause: BaseException) -> None:
        super().__init__(resource, f"Fetching {resource} failed: {cause}")


class ResourceStatusError(ResourceError):
    """The resource answered with a non-success status."""

    def __init__(self, resource: str, status_text: str) -> None:
        super().__init__(resource, f"Fetching {resource} failed: {status_text}")
        self.status_text = status_text


class ResourceDecodeError(ResourceError):
    """The resource body is not valid JSON (or not the expected shape)."""

    def __init__(self, resource: str, cause: BaseException) -> None:
        super().__init__(resource, f"Parsing JSON {resource} failed: {cause}")


class BatchFetchError(CmsDataError):
    """At least one resource of the aggregate fetch failed."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed fetching CMS data: {cause}")


class InvalidVocabularyError(CmsDataError, ValueError):
    """A CMS declares licenses or categories outside the closed vocabulary."""

    def __init__(self, cms_name: str, field: str, tokens: list[str]) -> None:
        super().__init__(
            f"CMS {cms_name} has invalid or no {field}: {tokens}!"
        )
        self.cms_name = cms_name
        self.field = field
        self.tokens = tokens


class InvalidCmsRecordError(CmsDataError, ValueError):
    """A CMS record is missing a required key or has a mistyped field."""

    def __init__(self, cms_name: str | None, cause: BaseException) -> None:
        super().__init__(
            f"CMS {cms_name} has a malformed record "
            f"({type(cause).__name__}): {cause}"
        )
        self.cms_name = cms_name
