import os

import uvicorn

from app.core.app import app  # noqa: F401
from app.core.config import settings

if __name__ == "__main__" and settings.APP_ENV != "vercel":
    port = int(os.getenv("PORT", settings.PORT))
    reload = settings.APP_ENV == "development"
    # Behind a proxy the client address comes from X-Forwarded-For; geolocation depends on it
    uvicorn.run(
        "app.core.app:app",
        host="0.0.0.0",
        port=port,
        reload=reload,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
