from typing import Iterable, List, Optional

import pytest

from garage.console import Console
from garage.models import CarRecord
from garage.persistence import PersistenceManager


class ScriptedInput:
    """read_line port fed from a fixed list of answers; None once exhausted."""
    
    def __init__(self, answers: Iterable[str]):
        self._answers = iter(list(answers))
        self.prompts: List[str] = []
    
    def __call__(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        return next(self._answers, None)


def make_console(answers: Iterable[str]):
    out: List[str] = []
    return Console(ScriptedInput(answers), out.append), out


@pytest.fixture
def sample_records() -> List[CarRecord]:
    return [
        CarRecord('Toyota', 2020, 19999.99),
        CarRecord('Лада', 1987, 1500.5),
        CarRecord('', -1, 0.0),
    ]


@pytest.fixture
def manager() -> PersistenceManager:
    return PersistenceManager()
