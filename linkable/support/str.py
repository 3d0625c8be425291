"""
String Helper Functions
Laravel-style string manipulation utilities
"""
import re


class Str:
    """
    String manipulation helper class (Laravel-style)

    Provides static methods for the string operations used when
    deriving routes from class names:
    - base name extraction from qualified names
    - English pluralization
    - case and separator trimming utilities
    """

    # Words that are the same in singular and plural form
    UNCOUNTABLE = frozenset([
        'audio', 'bison', 'chassis', 'compensation', 'coreopsis', 'data', 'deer',
        'education', 'equipment', 'evidence', 'feedback', 'fish', 'furniture',
        'gold', 'information', 'knowledge', 'love', 'metadata', 'money', 'moose',
        'news', 'nutrition', 'offspring', 'plankton', 'police', 'rain', 'rice',
        'series', 'sheep', 'species', 'traffic', 'wheat',
    ])

    # Irregular singular => plural forms
    IRREGULAR = {
        'child': 'children',
        'foot': 'feet',
        'goose': 'geese',
        'leaf': 'leaves',
        'man': 'men',
        'mouse': 'mice',
        'ox': 'oxen',
        'person': 'people',
        'tooth': 'teeth',
        'woman': 'women',
    }

    # Regex rules, first match wins
    PLURAL_RULES = [
        (r'(quiz)$', r'\1zes'),
        (r'^(ox)$', r'\1en'),
        (r'([m|l])ouse$', r'\1ice'),
        (r'(matr|vert|ind)(ix|ex)$', r'\1ices'),
        (r'(x|ch|ss|sh|zz)$', r'\1es'),
        (r'([^aeiouy]|qu)y$', r'\1ies'),
        (r'(hive)$', r'\1s'),
        (r'(?:([^f])fe|([lr])f)$', r'\1\2ves'),
        (r'sis$', 'ses'),
        (r'([ti])um$', r'\1a'),
        (r'(buffal|tomat|potat|her|ech)o$', r'\1oes'),
        (r'(bu)s$', r'\1ses'),
        (r'(alias|status|campus)$', r'\1es'),
        (r'(octop|vir)us$', r'\1i'),
        (r'(ax|cris|test)is$', r'\1es'),
        (r's$', 's'),
        (r'$', 's'),
    ]

    @staticmethod
    def lower(value: str) -> str:
        """Convert string to lowercase"""
        return value.lower()

    @staticmethod
    def base_name(value: str) -> str:
        """
        Get the last identifier component of a qualified name

        Both Python dotted paths and backslash namespaces are accepted.

        Args:
            value: Qualified name

        Returns:
            Unqualified name

        Example:
            Str.base_name('app.models.User')  # 'User'
            Str.base_name('Outer.Inner')  # 'Inner'
            Str.base_name('app\\models\\Photo')  # 'Photo'
        """
        return re.split(r'[.\\]', value.rstrip('.\\'))[-1]

    @staticmethod
    def trim(value: str, characters: str = ' ') -> str:
        """
        Strip the given characters from both ends of a string

        Example:
            Str.trim('/users/', '/')  # 'users'
        """
        return value.strip(characters)

    @staticmethod
    def plural(value: str) -> str:
        """
        Get the plural form of an English word

        The case of the first letter is preserved for irregular words.

        Args:
            value: Singular word

        Returns:
            Plural word

        Example:
            Str.plural('user')  # 'users'
            Str.plural('category')  # 'categories'
            Str.plural('person')  # 'people'
            Str.plural('sheep')  # 'sheep'
        """
        if not value:
            return value

        lowered = value.lower()

        if lowered in Str.UNCOUNTABLE:
            return value

        if lowered in Str.IRREGULAR:
            plural = Str.IRREGULAR[lowered]
            if value[0].isupper():
                plural = plural[0].upper() + plural[1:]
            return plural

        for pattern, replacement in Str.PLURAL_RULES:
            if re.search(pattern, value, re.IGNORECASE):
                return re.sub(pattern, replacement, value, count=1, flags=re.IGNORECASE)

        return value
