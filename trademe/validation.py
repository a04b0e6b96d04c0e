"""Required-parameter validation shared by the client operations."""

from typing import Any, Callable, Mapping, NoReturn, Sequence


def missing_keys(required_keys: Sequence[str], params: Mapping[str, Any]) -> list[str]:
    """Return the required keys absent from ``params``, in required order."""
    return [key for key in required_keys if key not in params]


def validate_required(
    required_keys: Sequence[str],
    params: Mapping[str, Any],
    on_failure: Callable[[list[str]], NoReturn],
) -> None:
    """
    Check that every required key is present in ``params``.

    Only presence is checked; empty values pass. When any key is missing,
    ``on_failure`` is called with the full list of required keys (not just the
    missing ones) and is expected to raise.

    Args:
        required_keys: Key names that must be present
        params: Supplied parameters
        on_failure: Handler receiving the required keys, e.g. one raising
            :class:`~trademe.exceptions.ClientException`
    """
    if missing_keys(required_keys, params):
        on_failure(list(required_keys))
