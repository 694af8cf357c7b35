"""Typed async client for the enotaris-services REST API.

One stateless function per endpoint, each taking an ``ApiClient`` and a
(nullable) bearer token.
"""

from enotaris.client.http import ApiClient, api_fetch, request_json

__all__ = ["ApiClient", "api_fetch", "request_json"]
