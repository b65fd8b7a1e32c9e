"""
CLI utilities for locating model objects from the command line.
"""

import importlib
import logging

import click

from .schema_model.nodes import Model, Schema

logger = logging.getLogger(__name__)


def load_target(target: str) -> Model | Schema:
    """
    Import a model or schema object given as ``package.module:attribute``.

    Args:
        target: Module path and attribute name separated by a colon.
            The attribute may be dotted (``module:holder.schema``).

    Returns:
        The Model or Schema object found at that location

    Raises:
        click.BadParameter: If the target is malformed, cannot be imported,
            or does not hold a Model or Schema
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(f"Expected 'module:attribute', got '{target}'")

    logger.debug("Importing module %s", module_name)
    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"Cannot import module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise click.BadParameter(f"'{module_name}' has no attribute '{attr_path}'") from e

    if not isinstance(obj, Model) and not isinstance(obj, Schema):
        raise click.BadParameter(f"'{target}' is a {type(obj).__name__}, expected a Model or a Schema")

    logger.debug("Loaded %s from %s", type(obj).__name__, target)
    return obj
