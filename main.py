# FastAPI Application Redirect
# This file redirects to the actual app in the smartbizflow package

from smartbizflow.main import app

# This allows uvicorn to find the app when running from root directory
# uvicorn main:app --host 0.0.0.0 --port 8001
