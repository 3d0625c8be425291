"""
HTML Helper
Renders HTML tags and hyperlinks (Laravel/Yii-style)
"""
import html
from typing import Any, Dict, Optional


class Html:
    """
    HTML markup helper

    Usage:
        Html.tag('span', 'Ann', {'class': ['badge', 'muted']})
        # <span class="badge muted">Ann</span>

        Html.a('Ann', user.url_route, {'target': '_blank'})
        # <a href="/users/view?id=1" target="_blank">Ann</a>
    """

    # Attributes whose dict values expand to prefixed attributes
    DATA_ATTRIBUTES = ('data', 'aria')

    @staticmethod
    def encode(content: Any) -> str:
        """Escape special HTML characters"""
        return html.escape(str(content), quote=True)

    @staticmethod
    def render_attributes(options: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a dict of HTML attributes

        Rules:
        - True renders a bare attribute (``disabled``)
        - None and False are skipped
        - list values of ``class`` are joined with spaces
        - dict values of ``data``/``aria`` expand to ``data-*``/``aria-*``

        Args:
            options: Attribute name => value

        Returns:
            Attribute string with a leading space, or '' when empty
        """
        if not options:
            return ''

        rendered = []
        for name, value in options.items():
            if value is None or value is False:
                continue

            if name in Html.DATA_ATTRIBUTES and isinstance(value, dict):
                for sub_name, sub_value in value.items():
                    if sub_value is None or sub_value is False:
                        continue
                    if sub_value is True:
                        rendered.append(f' {name}-{sub_name}')
                    else:
                        rendered.append(f' {name}-{sub_name}="{Html.encode(sub_value)}"')
                continue

            if value is True:
                rendered.append(f' {name}')
                continue

            if isinstance(value, (list, tuple)):
                value = ' '.join(str(item) for item in value)

            rendered.append(f' {name}="{Html.encode(value)}"')

        return ''.join(rendered)

    @staticmethod
    def tag(name: str, content: Any = '', options: Optional[Dict[str, Any]] = None, encode: bool = True) -> str:
        """
        Render a complete HTML element

        Args:
            name: Tag name
            content: Element content
            options: HTML attributes
            encode: Escape the content

        Returns:
            Rendered element
        """
        body = Html.encode(content) if encode else str(content)
        return f"<{name}{Html.render_attributes(options)}>{body}</{name}>"

    @staticmethod
    def a(text: Any, url: Any = None, options: Optional[Dict[str, Any]] = None, encode: bool = True) -> str:
        """
        Render a hyperlink

        Args:
            text: Link text
            url: UrlRoute or URL string; rendered through the URL facade
                unless it is already a string. None omits the href.
            options: HTML attributes
            encode: Escape the link text

        Returns:
            Rendered anchor element
        """
        attributes = dict(options or {})
        if url is not None:
            from linkable.support.facades import URL
            attributes['href'] = url if isinstance(url, str) else URL.to(url)

        # href first, for readable markup
        if 'href' in attributes:
            attributes = {'href': attributes.pop('href'), **attributes}

        return Html.tag('a', text, attributes, encode=encode)
