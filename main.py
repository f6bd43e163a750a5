# main.py
import os
import logging
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from database import init_db
from Services.promo_router import router as promo_router
from Services.product_router import router as product_router
from Services.article_router import router as article_router
from Services.comment_router import router as comment_router
from Services.contact_router import router as contact_router
from Services.booking_router import router as booking_router

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "DEBUG").upper())
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

cors_origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# Create FastAPI app
app = FastAPI(
    title="Autoshop API",
    description="""
    API for the automotive shop website:
    - Promotions and products
    - Articles, likes, views and comments
    - Contact messages
    - Service bookings
    """,
    version=API_VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Store failures and other unexpected errors surface as a 500 with the original message
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error processing request {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "type": type(exc).__name__}
    )

# Include routers
app.include_router(promo_router, prefix="/api/promos", tags=["promos"])
app.include_router(product_router, prefix="/api/products", tags=["products"])
app.include_router(article_router, prefix="/api/articles", tags=["articles"])
app.include_router(comment_router, prefix="/api/comments", tags=["comments"])
app.include_router(contact_router, prefix="/api/contact", tags=["contact"])
app.include_router(booking_router, prefix="/api/bookings", tags=["bookings"])

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    logger.info("Initializing database...")
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise

@app.get("/")
async def root():
    return {
        "message": "Welcome to Autoshop API",
        "version": API_VERSION,
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }

@app.get("/healthcheck")
async def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("SERVER_PORT", "2022")), log_level="debug")
