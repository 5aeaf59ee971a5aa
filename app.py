"""
Password Policy Service - Main Application
FastAPI backend exposing password validation and generation
"""
from fastapi import FastAPI, HTTPException, status, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Optional, List
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
import logging
import os
from datetime import datetime, timezone

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Import application modules
from password_policy import (
    PasswordValidator, UserInfo, UnknownRuleError, ConfigurationError,
    SEQUENTIAL_WORDS, generate_password, list_rules
)
from password_policy.generator import DEFAULT_EXCLUDE
from password_policy.rules import MIN_LENGTH, MAX_LENGTH
from password_service import (
    SecurityHeadersMiddleware,
    RequestSizeLimitMiddleware,
    SecureErrorHandlingMiddleware,
    AuditLoggingMiddleware,
    log_audit_event
)

VERSION = "1.0.0"

# Similarity scoring is cubic in input length, so request fields are capped
MAX_INPUT_LENGTH = 256

GENERATOR_MAX_ATTEMPTS = int(os.getenv("GENERATOR_MAX_ATTEMPTS", "10000"))
VALIDATE_RATE_LIMIT = os.getenv("VALIDATE_RATE_LIMIT", "60/minute")
GENERATE_RATE_LIMIT = os.getenv("GENERATE_RATE_LIMIT", "20/minute")

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    enabled=os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
)

# Initialize FastAPI app
app = FastAPI(
    title="Password Policy Service",
    description="Password strength validation and compliant password generation",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Get CORS origins from environment
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "").split(",") if os.getenv("ALLOWED_ORIGINS") else []

if not ALLOWED_ORIGINS:
    if os.getenv("ENVIRONMENT") == "production":
        raise ValueError("ALLOWED_ORIGINS must be set in production environment")
    # Development default (Streamlit frontend)
    ALLOWED_ORIGINS = ["http://localhost:8501", "http://127.0.0.1:8501"]
    logger.warning("Using default CORS origins for development")

# Add middleware (each call wraps the ones added before it)
# 1. Audit logging (innermost - logs the status each endpoint returns)
app.add_middleware(AuditLoggingMiddleware)

# 2. Secure error handling
app.add_middleware(SecureErrorHandlingMiddleware)

# 3. Request size limiting
max_request_size = int(os.getenv("MAX_REQUEST_SIZE_KB", "64")) * 1024
app.add_middleware(RequestSizeLimitMiddleware, max_request_size=max_request_size)

# 4. Security headers
app.add_middleware(SecurityHeadersMiddleware)

# 5. CORS (outermost)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


# Pydantic models
class UserInfoPayload(BaseModel):
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    user_name: str = ""

class ValidateRequest(BaseModel):
    password: str = Field(..., max_length=MAX_INPUT_LENGTH)
    user_info: Optional[UserInfoPayload] = None
    old_password: Optional[str] = Field(None, max_length=MAX_INPUT_LENGTH)
    rules: Optional[List[str]] = None

class ViolationResponse(BaseModel):
    rule: str
    message: str

class ValidateResponse(BaseModel):
    valid: bool
    errors: List[str]
    violations: List[ViolationResponse]

class GenerateRequest(BaseModel):
    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH
    characters: Optional[str] = None
    exclude: Optional[str] = None

class GenerateResponse(BaseModel):
    password: str
    length: int

class RuleResponse(BaseModel):
    rule: str
    number: int
    description: str


# Startup event
@app.on_event("startup")
async def startup_event():
    """Log the active policy on startup"""
    logger.info("Starting Password Policy Service...")
    logger.info(
        f"Policy: length {MIN_LENGTH}-{MAX_LENGTH}, "
        f"{len(SEQUENTIAL_WORDS)} keyboard sequences, "
        f"generator bound {GENERATOR_MAX_ATTEMPTS} attempts"
    )

# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION
    }

@app.get("/rules", response_model=List[RuleResponse])
async def get_rules():
    """List every password rule with its description"""
    return list_rules()

# Password endpoints
@app.post("/password/validate", response_model=ValidateResponse)
@limiter.limit(VALIDATE_RATE_LIMIT)
async def validate(request: Request, payload: ValidateRequest):
    """
    Validate a password against the password rules
    Returns every violated rule, not just the first
    """
    try:
        user_info = None
        if payload.user_info is not None:
            user_info = UserInfo(
                email=payload.user_info.email,
                first_name=payload.user_info.first_name,
                last_name=payload.user_info.last_name,
                user_name=payload.user_info.user_name
            )

        validator = PasswordValidator(payload.password, user_info, payload.old_password)
        violations = validator.check(payload.rules)

        log_audit_event(
            action="password_validate",
            success=not violations,
            details={
                "rules": "all" if payload.rules is None else payload.rules,
                "violated": sorted({v.rule.value for v in violations})
            },
            request=request
        )

        return ValidateResponse(
            valid=not violations,
            errors=[v.message for v in violations],
            violations=[ViolationResponse(rule=v.rule.value, message=v.message) for v in violations]
        )

    except UnknownRuleError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Validation error: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Password validation failed")

@app.post("/password/generate", response_model=GenerateResponse)
@limiter.limit(GENERATE_RATE_LIMIT)
async def generate(request: Request, payload: GenerateRequest):
    """
    Generate a random password that passes every rule
    Runs on the worker thread pool with a bounded number of attempts
    """
    try:
        password = await run_in_threadpool(
            generate_password,
            min_length=payload.min_length,
            max_length=payload.max_length,
            characters=payload.characters,
            exclude=DEFAULT_EXCLUDE if payload.exclude is None else payload.exclude,
            max_attempts=GENERATOR_MAX_ATTEMPTS
        )

        log_audit_event(action="password_generate", success=True, request=request)

        return GenerateResponse(password=password, length=len(password))

    except ConfigurationError as e:
        log_audit_event(
            action="password_generate",
            success=False,
            details={"error": str(e)},
            request=request
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Generation error: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Password generation failed")

# Run application
if __name__ == "__main__":
    import uvicorn

    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    reload = os.getenv("API_RELOAD", "false").lower() == "true"

    logger.info(f"Starting server on {host}:{port}")

    uvicorn.run(
        "app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )
