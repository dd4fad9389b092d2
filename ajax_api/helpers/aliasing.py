import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger('ajax_api')


def aliasing(aliases: Mapping[str, str], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename top-level keys of `data` from alias to actual name.

    Pairs are applied in table order, so when two aliases point at the same
    name the last one present wins. Aliases missing from `data` are skipped.
    """
    result = dict(data)
    for alias, actual in aliases.items():
        if alias not in result:
            logger.debug(f"Alias '{alias}' not present in data, skipping")
            continue
        value = result.pop(alias)
        result[actual] = value
    return result


def flip_aliases(aliases: Mapping[str, str]) -> Dict[str, str]:
    """Swap each pair; a later alias for the same name replaces an earlier one."""
    return {actual: alias for alias, actual in aliases.items()}


def anti_aliasing(aliases: Mapping[str, str], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Undo `aliasing` so the keys carry the view-facing names again."""
    return aliasing(flip_aliases(aliases), data)
