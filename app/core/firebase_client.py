"""Firebase Client Module

This module owns the Firebase admin app used by the service. A single
FirebaseClient is constructed during application startup and handed to the
routes and actions that need it, exposing the shared authentication and
Firestore handles.

Initialization is idempotent: when an app with the same name is already
registered with firebase_admin, it is reused instead of being created again.

Dependencies:
- firebase_admin: For app initialization, authentication and Firestore access.
- loguru: For logging operations.
- os: For credentials file checks.
"""

import os
from datetime import timedelta
from typing import Optional

import firebase_admin
from firebase_admin import auth, credentials, firestore_async
from loguru import logger

DEFAULT_APP_NAME = "[DEFAULT]"


class FirebaseClient:
    """Explicitly constructed handle to the Firebase admin app.

    Attributes:
        credentials_path (str): Path to the service account JSON file
        project_id (str, optional): Firebase project identifier
        app_name (str): Name the app is registered under in firebase_admin
    """

    def __init__(self, credentials_path: Optional[str] = None, project_id: Optional[str] = None, app_name: str = DEFAULT_APP_NAME):
        self.credentials_path = credentials_path
        self.project_id = project_id
        self.app_name = app_name
        self._app: Optional[firebase_admin.App] = None
        self._owns_app = False
        self._db = None

    def initialize(self) -> firebase_admin.App:
        """Initialize the Firebase app, or reuse one already registered.

        Returns:
            firebase_admin.App: The shared app handle

        Raises:
            FileNotFoundError: If the credentials file does not exist
        """
        if self._app is not None:
            return self._app

        try:
            self._app = firebase_admin.get_app(self.app_name)
            logger.info(f"Reusing existing Firebase app '{self.app_name}'")
            return self._app
        except ValueError:
            pass

        if not self.credentials_path or not os.path.exists(self.credentials_path):
            logger.error(f"Firebase credentials file not found at {self.credentials_path}")
            raise FileNotFoundError(f"Firebase credentials file not found at {self.credentials_path}")

        cred = credentials.Certificate(self.credentials_path)
        options = {"projectId": self.project_id} if self.project_id else None
        self._app = firebase_admin.initialize_app(cred, options, name=self.app_name)
        self._owns_app = True
        logger.info(f"Firebase app '{self.app_name}' initialized")
        return self._app

    @property
    def app(self) -> firebase_admin.App:
        return self.initialize()

    @property
    def db(self):
        """Async Firestore client bound to this app."""
        if self._db is None:
            self._db = firestore_async.client(app=self.app)
        return self._db

    def verify_id_token(self, id_token: str, check_revoked: bool = True) -> dict:
        return auth.verify_id_token(id_token, app=self.app, check_revoked=check_revoked)

    def verify_session_cookie(self, session_cookie: str, check_revoked: bool = True) -> dict:
        return auth.verify_session_cookie(session_cookie, check_revoked=check_revoked, app=self.app)

    def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        cookie = auth.create_session_cookie(id_token, expires_in=expires_in, app=self.app)
        return cookie.decode("utf-8") if isinstance(cookie, bytes) else cookie

    def get_user_by_email(self, email: str) -> auth.UserRecord:
        return auth.get_user_by_email(email, app=self.app)

    def close(self) -> None:
        """Release the app if this client created it."""
        if self._app is not None and self._owns_app:
            firebase_admin.delete_app(self._app)
            logger.info(f"Firebase app '{self.app_name}' deleted")
        self._app = None
        self._owns_app = False
        self._db = None
