# apps/goals/domain/exceptions.py


class InvalidInput(ValueError):
    """Błąd danych wejściowych (pusta nazwa, nieznana częstotliwość, zła data)."""
