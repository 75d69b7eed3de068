from .networking import Http, HttpVerb, RequestBuilder

__all__ = ["Http", "HttpVerb", "RequestBuilder"]
