from __future__ import annotations

from ..contracts.enums import WebMethod
from ..vectors.base import InputVector


def switch_method(vector: InputVector) -> InputVector:
    """
    Return a copy of ``vector`` sent with the other HTTP method.

    GET -> POST also strips the query from the target of query-based vectors,
    otherwise the stale GET params could take precedence over the body.
    Anything else -> GET leaves the target alone; no query string is rebuilt
    from the fields.
    """
    c = vector.clone()
    if c.method == WebMethod.GET:
        if c.is_query_based_kind():
            c.target = c.target.split("?", 1)[0]
        c.method = WebMethod.POST
    else:
        c.method = WebMethod.GET
    return c
