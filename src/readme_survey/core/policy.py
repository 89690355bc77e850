"""Fixed classification policy."""

CSHARP_CODE_FENCES = frozenset({"c#", "cs", "csharp"})

# From the NuGet gallery list of trusted image domains.
TRUSTED_IMAGE_HOSTS = (
    "api.bintray.com",
    "api.codacy.com",
    "app.codacy.com",
    "api.codeclimate.com",
    "api.dependabot.com",
    "api.travis-ci.com",
    "api.travis-ci.org",
    "app.fossa.io",
    "badge.fury.io",
    "badgen.net",
    "badges.gitter.im",
    "bettercodehub.com",
    "buildstats.info",
    "ci.appveyor.com",
    "circleci.com",
    "codecov.io",
    "codefactor.io",
    "coveralls.io",
    "gitlab.com",
    "img.shields.io",
    "isitmaintained.com",
    "opencollective.com",
    "snyk.io",
    "sonarcloud.io",
    "raw.github.com",
    "raw.githubusercontent.com",
    "user-images.githubusercontent.com",
    "camo.githubusercontent.com",
)

MAILTO_REDACTION = "[redacted]"


def is_csharp_fence(info: str | None) -> bool:
    """Return True if a fence info string names C#."""
    if not info:
        return False
    return info.strip().lower() in CSHARP_CODE_FENCES
