import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    API_NAME = os.environ.get('API_NAME', 'Playcard API')
    API_VERSION = os.environ.get('API_VERSION', '1.0.0')
    # Minimum roster size for a new game
    MIN_PLAYERS = int(os.environ.get('MIN_PLAYERS', '2'))
    # Comma separated list of allowed origins, or '*'
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '5000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
