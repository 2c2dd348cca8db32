from app.database import SessionLocal


# Database session per request
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
