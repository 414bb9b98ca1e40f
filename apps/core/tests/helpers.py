# apps/core/tests/helpers.py
import json

import requests


def make_response(status_code, body=None, raw=None):
    """Build a real requests.Response without touching the network"""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = 'utf-8'
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode('utf-8')
    else:
        response._content = b''
    return response
