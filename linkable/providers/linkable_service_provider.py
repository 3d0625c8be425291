"""
Linkable Service Provider
Registers the URL generator and html helper, and wires request context into Sanic
"""
from linkable.providers.service_provider import ServiceProvider
from linkable.support.facades import Facade


class LinkableServiceProvider(ServiceProvider):
    """
    Usage:
        app = Sanic('shop')
        provider = LinkableServiceProvider(app)
        provider.register()
        provider.boot()

        # In handlers, absolute urls now use the request host:
        URL.to(product.url_route, absolute=True)
    """

    def register(self):
        """Register the URL generator and the html helper"""
        from linkable.http.url import UrlGenerator
        from linkable.support import Config, Html

        def make_url_generator(container):
            """Factory for the URL generator, rooted at app.URL when configured"""
            return UrlGenerator(root_url=Config.get('app.URL'))

        self.container.singleton('url_generator', make_url_generator)
        if not self.container.has('html'):
            self.container.singleton('html', lambda c: Html())
        Facade.set_app(self.container)

    def boot(self):
        """Attach the request context middleware"""
        from linkable.middleware import UrlContextMiddleware

        middleware = UrlContextMiddleware._register_middleware()
        if middleware is not None:
            middleware.register(self.sanic_app)
