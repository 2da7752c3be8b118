import os
from dotenv import load_dotenv


load_dotenv()

class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///inventory.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev')
    LOCAL_URL = os.getenv('LOCAL_URL', 'http://127.0.0.1:5000')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
