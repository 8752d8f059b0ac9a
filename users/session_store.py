"""
Persistent session storage for bot users
Keeps one ``{token, user}`` record per Telegram user in a JSON file
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from users.models import Session


class SessionStore:
    """
    File-backed store of authenticated sessions keyed by Telegram user id

    The file is read on every lookup rather than cached, so every component
    sees the same state. Records are written whole (token and profile
    together) or removed; an entry that does not parse into a
    :class:`Session` is reported as absent.
    """

    def __init__(self, file_path: str = 'data/sessions.json') -> None:
        """
        Initialize the store

        Args:
            file_path: Path to the JSON file holding the sessions
        """
        self.file_path = Path(file_path)
        self.logger = logging.getLogger('SessionStore')
        self.logger.info(f"SessionStore using {self.file_path}")

    def get(self, user_id: int) -> Optional[Session]:
        """
        Return the persisted session for a user

        Args:
            user_id: Telegram user ID to lookup

        Returns:
            Session if a well-formed token + profile pair exists, None otherwise
        """
        record = self._load_records().get(user_id)
        if record is None:
            return None

        session = Session.from_record(record)
        if session is None:
            self.logger.warning(f"Malformed session record for user_id: {user_id}, treating as absent")
        return session

    def get_token(self, user_id: int) -> Optional[str]:
        session = self.get(user_id)
        return session.token if session else None

    def save(self, user_id: int, token: str, profile: Mapping[str, Any]) -> Session:
        """
        Persist a session returned by login or registration

        Raises:
            ValueError: If token and profile do not form a valid session
        """
        record = {'token': token, 'user': dict(profile)}
        session = Session.from_record(record)
        if session is None:
            raise ValueError("Session requires a token and a profile with id and userType")

        records = self._load_records()
        records[user_id] = session.to_record()
        self._save_records(records)

        self.logger.info(f"Saved session for user_id: {user_id} ({session.role.value})")
        return session

    def update_profile(self, user_id: int, profile: Mapping[str, Any]) -> Optional[Session]:
        """Merge refreshed profile fields into an existing session."""
        current = self.get(user_id)
        if current is None:
            self.logger.debug(f"No session to update for user_id: {user_id}")
            return None

        merged = dict(current.profile)
        merged.update({key: value for key, value in profile.items() if value is not None})
        return self.save(user_id, current.token, merged)

    def clear(self, user_id: int) -> bool:
        """Remove a user's session. Returns True when something was removed."""
        records = self._load_records()
        if user_id not in records:
            return False

        del records[user_id]
        self._save_records(records)
        self.logger.info(f"Cleared session for user_id: {user_id}")
        return True

    def user_ids(self) -> List[int]:
        """Return the ids of users holding a valid session."""
        return [
            user_id
            for user_id, record in self._load_records().items()
            if Session.from_record(record) is not None
        ]

    def _save_records(self, records: Dict[int, Any]) -> None:
        """
        Write all records atomically

        The data is dumped to a temporary file in the same directory and then
        moved over the target, so a crash never leaves half a record behind.
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            payload = {str(user_id): record for user_id, record in records.items()}

            fd, tmp_path = tempfile.mkstemp(dir=str(self.file_path.parent), suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False, default=str)
                os.replace(tmp_path, self.file_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise

            self.logger.debug(f"Successfully saved {len(records)} sessions to {self.file_path}")

        except Exception as e:
            self.logger.error(f"Error saving sessions to {self.file_path}: {e}", exc_info=True)
            raise

    def _load_records(self) -> Dict[int, Any]:
        """
        Load raw records from the JSON file

        Returns:
            Dictionary of records keyed by user id;
            empty if the file doesn't exist or is invalid
        """
        try:
            if not self.file_path.exists() or self.file_path.stat().st_size == 0:
                return {}

            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                self.logger.error(f"Session file {self.file_path} does not contain an object")
                return {}

            # JSON keys are always strings
            records = {}
            for key, value in data.items():
                try:
                    records[int(key)] = value
                except ValueError:
                    self.logger.warning(f"Invalid user_id key in session file: {key}, skipping entry")
            return records

        except json.JSONDecodeError as e:
            self.logger.error(f"Invalid JSON in session file {self.file_path}: {e}")
            return {}

        except OSError as e:
            self.logger.error(f"Error loading sessions from {self.file_path}: {e}", exc_info=True)
            return {}


__all__ = ['SessionStore']
