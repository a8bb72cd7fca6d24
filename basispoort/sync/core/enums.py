"""Core enumerations shared across services.

Key Types:
    - Environment: Basispoort deployment target and its REST base URL
    - ApplicationTag: Kind of hosted application (method or product)

Design Decisions:
    - String enums: values equal the strings used in configuration and on
      the wire, so they serialize without a mapping table
    - Base URLs end in a slash: service paths are joined relative to them
      and never start with a slash themselves
"""

from enum import Enum

from yarl import URL

from .exceptions import InvalidEnvironmentString

_BASE_URLS = {
    "test": URL("https://test-rest.basispoort.nl/"),
    "acceptance": URL("https://acceptatie-rest.basispoort.nl/"),
    "staging": URL("https://staging-rest.basispoort.nl/"),
    "production": URL("https://rest.basispoort.nl/"),
}


class Environment(str, Enum):
    """A Basispoort environment.

    Environments can be parsed from their lowercase tag, e.g. from ``.env``
    variables. Each environment has its own fixed ``base_url``, used by every
    ``RestClient`` built for it.
    """

    TEST = "test"
    ACCEPTANCE = "acceptance"
    STAGING = "staging"
    PRODUCTION = "production"

    @property
    def base_url(self) -> URL:
        """REST base URL of this environment."""
        return _BASE_URLS[self.value]

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Parse an exact lowercase environment tag.

        Raises:
            InvalidEnvironmentString: If ``value`` is not one of ``test``,
                ``acceptance``, ``staging`` or ``production``.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnvironmentString(value) from None


class ApplicationTag(str, Enum):
    """Tag marking what kind of application a method or product is."""

    TEACHER_APPLICATION = "leerkrachtApplicatie"
    TEST_APPLICATION = "toetsApplicatie"
