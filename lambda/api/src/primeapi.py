# http binding for the prime checker: the same core handler served through FastAPI,
# runnable locally with uvicorn or on lambda behind API Gateway via Mangum
import json
import os

from fastapi import FastAPI, Request, Response
from mangum import Mangum

import prime

app = FastAPI(root_path=os.environ.get("API_ROOT_PATH", "/prod"))
handler = Mangum(app)


def _to_response(envelope: prime.Envelope) -> Response:
    return Response(
        content=envelope.body,
        status_code=envelope.status_code,
        headers=envelope.headers,
    )


@app.get("/")
def root():
    return {"message": "Prime number checker"}


@app.post("/prime")
async def check_prime(request: Request):
    body = (await request.body()).decode("utf-8", errors="replace")
    return _to_response(prime.handle({"httpMethod": "POST", "body": body}))


@app.options("/prime")
def preflight():
    return _to_response(prime.handle({"httpMethod": "OPTIONS"}))


@app.get("/prime/{number}")
def prime_lookup(number: int):
    return _to_response(prime.handle({"httpMethod": "GET", "body": json.dumps({"number": number})}))
