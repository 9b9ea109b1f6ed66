import os
from unittest.mock import patch

from app import FlaskMicroservice, create_app


def create_test_app(**env: str) -> FlaskMicroservice:
    with patch.dict(os.environ, {'DATABASE_URL': 'sqlite://', **env}):
        return create_app()
