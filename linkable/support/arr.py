"""
Array Helper Functions
Laravel-style helpers for dictionaries and nested data
"""
from typing import Any, Callable, Dict, Mapping, Optional, Union


class Arr:
    """
    Dictionary manipulation helper class (Laravel-style)

    Usage:
        params = Arr.merge({'id': 1, 'tags': ['a']}, {'tags': ['b'], 'ref': 'x'})
        # {'id': 1, 'tags': ['a', 'b'], 'ref': 'x'}

        name = Arr.get(article, 'author.name')
        prefixed = Arr.prefix_keys({'id': 1}, 'p')  # {'pid': 1}
    """

    @staticmethod
    def merge(*mappings: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Recursively merge mappings from left to right

        Later keys override earlier ones, except that:
        - two lists at the same key are concatenated
        - two mappings at the same key are merged recursively

        None arguments are ignored. The inputs are never modified.

        Args:
            *mappings: Mappings to merge

        Returns:
            New merged dictionary
        """
        result: Dict[str, Any] = {}

        for mapping in mappings:
            if not mapping:
                continue

            for key, value in mapping.items():
                current = result.get(key)

                if isinstance(current, list) and isinstance(value, (list, tuple)):
                    result[key] = current + list(value)
                elif isinstance(current, dict) and isinstance(value, Mapping):
                    result[key] = Arr.merge(current, value)
                elif isinstance(value, Mapping):
                    result[key] = Arr.merge(value)
                elif isinstance(value, list):
                    result[key] = list(value)
                else:
                    result[key] = value

        return result

    @staticmethod
    def get(target: Any, key: Union[str, Callable[[Any], Any], None], default: Any = None) -> Any:
        """
        Get a value from a mapping or object using dot notation

        Args:
            target: Mapping or object to read from
            key: Key, attribute name or dotted path. A callable is called
                with the target and its result returned.
            default: Value returned when the path does not resolve

        Returns:
            Resolved value or default

        Example:
            Arr.get({'user': {'name': 'Ann'}}, 'user.name')  # 'Ann'
            Arr.get(article, 'author.name')
            Arr.get(article, lambda a: a.title.upper())
        """
        if key is None:
            return target

        if callable(key):
            return key(target)

        # Exact key takes precedence over dot notation
        if isinstance(target, Mapping) and key in target:
            return target[key]

        value = target
        for segment in key.split('.'):
            if isinstance(value, Mapping):
                if segment not in value:
                    return default
                value = value[segment]
            elif hasattr(value, segment):
                value = getattr(value, segment)
            else:
                return default

        return value

    @staticmethod
    def prefix_keys(mapping: Mapping[str, Any], prefix: str) -> Dict[str, Any]:
        """
        Prepend a prefix to every key of a mapping

        Example:
            Arr.prefix_keys({'id': 456}, 'p')  # {'pid': 456}
        """
        return {f"{prefix}{key}": value for key, value in mapping.items()}
