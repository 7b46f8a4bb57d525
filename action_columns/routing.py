"""
Routers turn the parameter set built by an action column into a URL.

The route is stored under the positional key ROUTE_PARAM (``0``) so it never
collides with named key parameters such as ``id``.
"""
import logging

from django.http import QueryDict
from django.urls import NoReverseMatch, get_resolver, reverse


logger = logging.getLogger(__name__)

ROUTE_PARAM = 0


class ReverseRouter:
    """
    Router backed by Django's URL resolver.

    The route ``"item/view"`` is reversed as the URL name ``"item:view"``, so a
    controller prefix maps onto a URL namespace. Parameters the URL pattern
    accepts become URL kwargs; the remaining ones are appended as a query string.

    Usage:
        router = ReverseRouter()
        router.to_route({0: 'item/update', 'id': '5'})               # '/item/5/update/'
        router.to_route({0: 'item/update', 'id': '5', 'lang': 'en'})  # '/item/5/update/?lang=en'
        router.to_route({0: 'item/view', 'id': '5'})                 # '/item/view/?id=5'
    """
    namespace_separator = ':'

    def __init__(self, urlconf=None, current_app=None):
        self.urlconf = urlconf
        self.current_app = current_app

    def get_url_name(self, route):
        return str(route).strip('/').replace('/', self.namespace_separator)

    def get_pattern_params(self, url_name):
        """Return the kwarg name lists of every pattern named url_name, longest first."""
        resolver = get_resolver(self.urlconf)
        *namespaces, name = url_name.split(self.namespace_separator)
        for namespace in namespaces:
            if namespace not in resolver.namespace_dict:
                # An application namespace resolves to its first instance namespace
                instances = resolver.app_dict.get(namespace)
                if not instances:
                    return []
                namespace = instances[0]
            resolver = resolver.namespace_dict[namespace][1]
        candidates = []
        for possibilities, *_ in resolver.reverse_dict.getlist(name):
            for _result, params in possibilities:
                candidates.append(list(params))
        return sorted(candidates, key=len, reverse=True)

    def to_route(self, params) -> str:
        params = dict(params)
        url_name = self.get_url_name(params.pop(ROUTE_PARAM))
        for accepted in self.get_pattern_params(url_name):
            if not set(accepted) <= set(params):
                continue
            kwargs = {name: params[name] for name in accepted}
            try:
                url = reverse(
                    url_name,
                    urlconf=self.urlconf,
                    kwargs=kwargs,
                    current_app=self.current_app,
                )
            except NoReverseMatch:
                continue
            query = {key: value for key, value in params.items() if key not in kwargs}
            if query:
                logger.debug(
                    "URL pattern %s does not accept %s, passing them as query parameters",
                    url_name,
                    sorted(map(str, query)),
                )
            return f"{url}{build_querystring(query)}"
        # No pattern fits; let Django report the failure
        return reverse(
            url_name,
            urlconf=self.urlconf,
            kwargs=params,
            current_app=self.current_app,
        )


def build_querystring(params):
    """Return '?a=1&b=2' for the given params, or '' when there are none."""
    query = QueryDict(mutable=True)
    for key, value in params.items():
        if value is not None:
            query[str(key)] = str(value)
    querystring = query.urlencode()
    return f'?{querystring}' if querystring else ''
