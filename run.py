# run.py

import uvicorn
from mobile_detect.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "mobile_detect.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=False,
        workers=settings.workers,
    )
