"""Serverless entrypoint wrapping the functions app for AWS Lambda/Vercel."""
from mangum import Mangum

from src.functions.app import create_app

app = create_app()
handler = Mangum(app, lifespan="off")
