from fastapi import FastAPI

from .api.routes import payments


app = FastAPI(title="Transfers24 API", version="1.0.0")

app.include_router(payments.router, prefix="/api/v1")
