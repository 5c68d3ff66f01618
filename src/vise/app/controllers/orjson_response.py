from typing import Any

import orjson
from starlette.responses import JSONResponse


class OrjsonResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return orjson.dumps(content)


def rejected(error: Exception, status_code: int) -> OrjsonResponse:
    return OrjsonResponse({"status": "Rejected", "error": str(error)}, status_code)
