from __future__ import annotations

from typing import Optional

from sqlmodel import Session

from artapp.models.entities import Setting


class SettingsRepository:
    """Repository for the key-value settings slots."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> Optional[str]:
        setting = self.session.get(Setting, key)
        return setting.value if setting else None

    def upsert(self, key: str, value: Optional[str]) -> Setting:
        setting = self.session.get(Setting, key)
        if setting is None:
            setting = Setting(key=key, value=value)
        else:
            setting.value = value
        self.session.add(setting)
        self.session.commit()
        self.session.refresh(setting)
        return setting
