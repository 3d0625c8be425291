"""
HTML Facade
Render tags and hyperlinks through the container's Html helper
"""
from linkable.support.facades.facade import Facade


class HTML(Facade):
    """
    HTML Rendering Facade

    Usage:
        from linkable.support.facades import HTML

        HTML.a('Ann', user.url_route, {'class': 'user'})
        HTML.tag('span', 'Ann')
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        """Get the registered name of the component"""
        return 'html'
