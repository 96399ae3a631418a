"""
Genetic Algorithm Exception Classes

This module defines custom exceptions for the genetic algorithm engine.
These exceptions provide clear error messages and handling guidance for the
configuration and runtime failures that may occur while advancing generations.
"""

import math
from typing import Optional


class EvolutionError(Exception):
    """Base exception class for all evolution-related errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.suggestion:
            return f"{self.message}. Suggestion: {self.suggestion}"
        return self.message


# =============================================================================
# Invalid Configuration Errors
# =============================================================================

class OutOfRangeError(EvolutionError):
    """
    Raised when a numeric parameter lies outside its closed valid range.

    Crossover, mutation and elitism rates must all be within [0, 1]. The error
    is raised once, when the owning object is constructed, and the object must
    not be used afterwards.
    """

    def __init__(self, name: str, value: float, lower: float, upper: float):
        self.name = name
        self.value = value
        self.lower = lower
        self.upper = upper
        message = f"{value} out of range for {name}: [{lower}, {upper}]"
        suggestion = f"{name} must be between {lower} and {upper} inclusive"
        super().__init__(message, suggestion)


# =============================================================================
# Constraint Violation Errors
# =============================================================================

class PopulationCapacityError(EvolutionError):
    """
    Raised when a chromosome is inserted into a population that is already full.

    A population never holds more individuals than its capacity.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        message = f"Population is full: capacity {capacity} reached"
        suggestion = "Create the population with a larger capacity or insert fewer chromosomes"
        super().__init__(message, suggestion)


class SelectionError(EvolutionError):
    """
    Raised when a selection policy cannot draw a pair of parents.

    This happens for an empty population or when the tournament arity is
    larger than the number of available individuals.
    """

    def __init__(self, message: str, population_size: int):
        self.population_size = population_size
        suggestion = "Seed the population with enough chromosomes before evolving it"
        super().__init__(message, suggestion)


# =============================================================================
# Runtime Errors
# =============================================================================

class ReproductionFailureError(EvolutionError):
    """
    Raised when a reproduction task fails while advancing a generation.

    Wraps the first observed failure (a selection, crossover or mutation error,
    or a cancelled task). No partially filled next generation is returned; the
    current population is untouched, so the call can simply be retried.
    """

    def __init__(self, cause: BaseException, task_index: Optional[int] = None):
        self.cause = cause
        self.task_index = task_index
        task_info = f" in task {task_index}" if task_index is not None else ""
        message = (
            f"Reproduction failed{task_info}: "
            f"{type(cause).__name__}: {cause}"
        )
        suggestion = "Retry advance_generation with the same current population"
        super().__init__(message, suggestion)


# =============================================================================
# Utility Functions
# =============================================================================

def validate_rate(name: str, rate: float) -> None:
    """Validate a probability-like rate is within [0, 1]."""
    # NaN fails every comparison, so check it explicitly
    if math.isnan(rate) or rate < 0.0 or rate > 1.0:
        raise OutOfRangeError(name, rate, 0, 1)


def validate_positive(name: str, value: int) -> None:
    """Validate an integer parameter is at least one."""
    if value < 1:
        raise OutOfRangeError(name, value, 1, math.inf)
