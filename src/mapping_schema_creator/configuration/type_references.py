"""Resolution of ``module.path:QualifiedName`` type references."""

from __future__ import annotations

import builtins
import importlib


class TypeReferenceError(Exception):
    """Raised when a type reference cannot be imported."""


def resolve_type_reference(reference: str) -> type:
    """Import the type named by ``reference``.

    ``module.path:Outer.Inner`` and ``module.path.Name`` are accepted; bare
    names such as ``str`` resolve to builtins.

    Raises:
      TypeReferenceError: If the module or attribute is missing, or the
        attribute is not a type.
    """
    text = reference.strip()
    if not text:
        raise TypeReferenceError("Type reference must not be empty.")

    if ":" in text:
        module_name, _, qualified_name = text.partition(":")
    elif "." in text:
        module_name, _, qualified_name = text.rpartition(".")
    else:
        module_name, qualified_name = builtins.__name__, text

    try:
        resolved: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeReferenceError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in qualified_name.split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise TypeReferenceError(
                f"Module '{module_name}' has no attribute '{qualified_name}'."
            ) from exc

    if not isinstance(resolved, type):
        raise TypeReferenceError(f"'{text}' does not name a type.")
    return resolved
