"""
Channel Routes: HTTP transport for method channels.

  POST /channels/{channel}   body: {"method": "getVersion", "arguments": null}

Every handled call answers 200 with the tagged response envelope
(`status` = success | error | not_implemented). Only an unknown channel
is an HTTP-level failure (404, via the global error handler).
"""

from fastapi import APIRouter

from sliding_tile.channels import get_channel_registry
from sliding_tile.models import MethodCall, MethodResponse

router = APIRouter(prefix="/channels", tags=["Channels"])


@router.get("")
async def list_channels():
    return {"channels": get_channel_registry().names}


@router.post("/{channel:path}", response_model=MethodResponse)
def invoke_channel(channel: str, call: MethodCall):
    return get_channel_registry().invoke(channel, call)
