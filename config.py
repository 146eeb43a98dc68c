import os
from dotenv import load_dotenv

load_dotenv()


#Over here all the configurations are added within this class
class Config:
    DB_PATH = os.getenv('DB_PATH', 'chirpy.db')
    PLATFORM = os.getenv('PLATFORM', '')
    # Directory served under /app/
    FILESERVER_ROOT = os.getenv('FILESERVER_ROOT', '.')
    BANNED_WORDS = ("kerfuffle", "sharbert", "fornax")
    MAX_CHIRP_LENGTH = 140
