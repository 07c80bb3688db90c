# backend/run.py
import sys
import uvicorn
from estate_board.config import get_settings

def main():
    settings = get_settings()
    try:
        uvicorn.run(
            "estate_board.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=settings.RELOAD
        )
    except Exception as e:
        print(f"Error starting the server: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
