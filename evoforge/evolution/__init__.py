"""
遺傳演算法引擎 (Genetic Algorithm Engine)

以精英保留加上並行繁衍任務推進種群世代。
"""

from .models import (
    FitnessFunction,
    Chromosome,
    BinaryChromosome,
    RealValuedChromosome,
    ChromosomePair,
)

from .population import (
    Population,
    ListPopulation,
    ElitisticListPopulation,
)

from .selection import (
    SelectionPolicy,
    TournamentSelection,
)

from .crossover import (
    CrossoverPolicy,
    ListChromosomeCrossover,
    OnePointCrossover,
    UniformCrossover,
)

from .mutation import (
    MutationPolicy,
    BinaryMutation,
    GaussianMutation,
)

from .listeners import (
    ConvergenceListener,
    PopulationStatistics,
    PopulationStatisticsLogger,
    GenerationStats,
    GenerationStatsRecorder,
)

from .stopping import (
    StoppingCondition,
    FixedGenerationCount,
    UnchangedBestFitness,
)

from .engine import (
    GeneticAlgorithmConfig,
    AbstractGeneticAlgorithm,
)

from .generation import (
    GeneticAlgorithm,
)

from .exceptions import (
    EvolutionError,
    OutOfRangeError,
    PopulationCapacityError,
    SelectionError,
    ReproductionFailureError,
    validate_rate,
    validate_positive,
)

__all__ = [
    # Models
    "FitnessFunction",
    "Chromosome",
    "BinaryChromosome",
    "RealValuedChromosome",
    "ChromosomePair",
    # Population
    "Population",
    "ListPopulation",
    "ElitisticListPopulation",
    # Selection
    "SelectionPolicy",
    "TournamentSelection",
    # Crossover
    "CrossoverPolicy",
    "ListChromosomeCrossover",
    "OnePointCrossover",
    "UniformCrossover",
    # Mutation
    "MutationPolicy",
    "BinaryMutation",
    "GaussianMutation",
    # Listeners
    "ConvergenceListener",
    "PopulationStatistics",
    "PopulationStatisticsLogger",
    "GenerationStats",
    "GenerationStatsRecorder",
    # Stopping
    "StoppingCondition",
    "FixedGenerationCount",
    "UnchangedBestFitness",
    # Engine
    "GeneticAlgorithmConfig",
    "AbstractGeneticAlgorithm",
    "GeneticAlgorithm",
    # Exceptions
    "EvolutionError",
    "OutOfRangeError",
    "PopulationCapacityError",
    "SelectionError",
    "ReproductionFailureError",
    "validate_rate",
    "validate_positive",
]
