"""
Exceptions du domaine CineGroup.

Le coeur de regroupement ne leve jamais d'exception sur des chemins ou des
noms degeneres : seules les erreurs de configuration sont signalees.
"""


class CineGroupError(Exception):
    """Exception de base de l'application."""


class NamingConfigurationError(CineGroupError):
    """Une expression de nommage configuree est invalide."""

    def __init__(self, setting: str, pattern: str, reason: str) -> None:
        self.setting = setting
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Expression invalide pour {setting}: {pattern!r} ({reason})")
