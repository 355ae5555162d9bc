"""AWS Lambda handler via Mangum.

Wraps the FastAPI app for API Gateway (v2 HTTP API) events. The app is
built at module level so it persists across warm invocations.

Environment variables (required):
    SUPABASE_URL, SUPABASE_ANON_KEY, SESSION_SECRET

Environment variables (recommended for Lambda):
    SESSION_BACKEND=dynamodb
    SESSION_HTTPS_ONLY=true
    DYNAMODB_TABLE=draftgen_sessions
    LOGOUT_DESTINATION=/login   (or / for draft-gen)
"""

from mangum import Mangum

from draftgen_auth.config import get_settings
from draftgen_auth.main import create_app
from draftgen_auth.session import DynamoDBSessionBackend

s = get_settings()

session_backend = None
if s.session_backend == "dynamodb":
    session_backend = DynamoDBSessionBackend(
        table_name=s.dynamodb_table,
        endpoint_url=s.dynamodb_endpoint,
        region_name=s.aws_region,
    )

app = create_app(session_backend=session_backend)

handler = Mangum(app, lifespan="off")
