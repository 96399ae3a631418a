#!/usr/bin/env python
"""evoforge 示範程式

以 OneMax 問題（最大化二元染色體中 1 的數量）示範完整的演化流程。
執行 python run.py [config.json] 即可啟動。
"""

import logging
import os
import sys

from evoforge.evolution import (
    BinaryChromosome,
    BinaryMutation,
    ElitisticListPopulation,
    FixedGenerationCount,
    GeneticAlgorithm,
    GeneticAlgorithmConfig,
    GenerationStatsRecorder,
    OnePointCrossover,
    PopulationStatisticsLogger,
    TournamentSelection,
)


CHROMOSOME_LENGTH = 40


def one_max(genes):
    """OneMax 適應度：1 的數量"""
    return float(sum(genes))


def load_config(path=None):
    """讀取配置檔，未指定時使用預設配置"""
    if path is None:
        return GeneticAlgorithmConfig()

    if not os.path.exists(path):
        print(f"錯誤: 找不到配置檔 {path}")
        sys.exit(1)

    with open(path, encoding="utf-8") as handle:
        config = GeneticAlgorithmConfig.from_json(handle.read())

    if not config.validate():
        print(f"錯誤: 配置無效 {config}")
        sys.exit(1)

    return config


def main():
    """執行 OneMax 演化"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(sys.argv[1] if len(sys.argv) > 1 else None)

    print("=" * 50)
    print("  evoforge OneMax 示範")
    print("=" * 50)

    initial = ElitisticListPopulation(
        config.population_limit,
        [
            BinaryChromosome.random(CHROMOSOME_LENGTH, one_max)
            for _ in range(config.population_limit)
        ],
    )

    recorder = GenerationStatsRecorder()
    algorithm = GeneticAlgorithm.from_config(
        config,
        OnePointCrossover(),
        BinaryMutation(),
        TournamentSelection(config.tournament_arity),
        PopulationStatisticsLogger(),
        recorder,
    )

    final = algorithm.evolve(
        initial,
        FixedGenerationCount(config.max_generations),
        max_workers=config.max_workers,
    )

    best = final.fittest()
    print("-" * 50)
    print(f"世代數: {algorithm.generations_evolved}")
    print(f"最佳適應度: {best.fitness:.0f} / {CHROMOSOME_LENGTH}")
    print(recorder.to_dataframe().tail())


if __name__ == '__main__':
    main()
