"""
API dependencies
"""

from fastapi import Request

from ..core.hospital import Hospital


def get_hospital(request: Request) -> Hospital:
    """取得應用程式共用的 Hospital 實例"""
    return request.app.state.hospital
