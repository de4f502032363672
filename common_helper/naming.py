"""Naming policy for exported outputs and stored parameters.

Every externally visible name produced by the helper goes through
``compute_key`` so that writers and readers in different stacks derive the
same name from the same arguments.
"""

from typing import Final

PREFIX_SEPARATOR: Final[str] = "-"
OUTPUT_ID_PREFIX: Final[str] = "Output"


def compute_key(
    key: str,
    prefix_enable: bool,
    prefix_custom_name: str | None,
    project_prefix: str,
) -> str:
    """Compute the external name for a key.

    Args:
        key: Unprefixed key supplied by the caller.
        prefix_enable: Whether a prefix is applied at all.
        prefix_custom_name: Prefix used instead of the project prefix. Empty
            values fall back to the project prefix.
        project_prefix: Prefix configured for the deployment unit.

    Returns:
        ``"<prefix>-<key>"`` when prefixing is enabled, otherwise ``key``.
    """
    if not prefix_enable:
        return key
    prefix = prefix_custom_name if prefix_custom_name else project_prefix
    return f"{prefix}{PREFIX_SEPARATOR}{key}"


def output_id(key: str) -> str:
    """Return the stack-local construct id used for an exported output."""
    return f"{OUTPUT_ID_PREFIX}{PREFIX_SEPARATOR}{key}"
