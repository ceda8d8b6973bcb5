"""Package and directory name validation."""
import re

# npm package-name grammar: optional "@scope/" followed by the unscoped name
PACKAGE_NAME_PATTERN = re.compile(
    r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*"
)


def is_valid_package_name(name: str) -> bool:
    """Return True if ``name`` can be written as a package.json name."""
    return PACKAGE_NAME_PATTERN.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Coerce a project name into a package.json name.

    Best effort only: the result may still be rejected by
    ``is_valid_package_name`` (an empty or all-symbol input, for example),
    so callers must validate it again.
    """
    name = name.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    return re.sub(r"[^a-z0-9\-~]+", "-", name)
