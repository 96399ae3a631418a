"""
遺傳演算法引擎 (Genetic Algorithm Engine)

提供演化配置與執行迴圈：反覆推進世代直到停止條件滿足，並通知收斂監聽器。
"""

from abc import ABC, abstractmethod
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional
import json
import logging
import math

from .crossover import CrossoverPolicy
from .listeners import ConvergenceListener
from .mutation import MutationPolicy
from .population import Population
from .selection import SelectionPolicy
from .stopping import StoppingCondition


logger = logging.getLogger(__name__)


@dataclass
class GeneticAlgorithmConfig:
    """演化配置

    控制遺傳演算法的所有可配置參數。

    Attributes:
        population_limit: 種群容量
        crossover_rate: 交叉率 [0, 1]
        mutation_rate: 突變率 [0, 1]
        elitism_rate: 精英保留率 [0, 1]
        tournament_arity: 競賽選擇大小
        max_generations: 最大世代數
        max_workers: 工作執行緒數量，None 表示由 ThreadPoolExecutor 決定
    """
    population_limit: int = 50
    crossover_rate: float = 0.8
    mutation_rate: float = 0.02
    elitism_rate: float = 0.1
    tournament_arity: int = 2
    max_generations: int = 100
    max_workers: Optional[int] = None

    def validate(self) -> bool:
        """驗證配置是否有效

        Returns:
            配置是否有效
        """
        rates = (self.crossover_rate, self.mutation_rate, self.elitism_rate)
        return (
            self.population_limit >= 1
            and all(not math.isnan(rate) and 0.0 <= rate <= 1.0 for rate in rates)
            and 1 <= self.tournament_arity <= self.population_limit
            and self.max_generations >= 1
            and (self.max_workers is None or self.max_workers >= 1)
        )

    def to_dict(self) -> Dict[str, Any]:
        """轉換為字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneticAlgorithmConfig":
        """從字典建立，未知的鍵會被拒絕

        Raises:
            ValueError: 若包含未知的配置鍵
        """
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def to_json(self) -> str:
        """序列化為 JSON 字串"""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "GeneticAlgorithmConfig":
        """從 JSON 字串反序列化"""
        return cls.from_dict(json.loads(json_str))


class AbstractGeneticAlgorithm(ABC):
    """遺傳演算法執行迴圈

    持有選擇、交叉、突變策略與精英保留率，
    由子類別實作單一世代的推進 advance_generation()。

    Attributes:
        crossover_policy: 交叉策略
        mutation_policy: 突變策略
        selection_policy: 選擇策略
        elitism_rate: 精英保留率
        generations_evolved: 最近一次 evolve() 已推進的世代數
    """

    def __init__(
        self,
        crossover_policy: CrossoverPolicy,
        mutation_policy: MutationPolicy,
        selection_policy: SelectionPolicy,
        elitism_rate: float,
        *convergence_listeners: ConvergenceListener,
    ):
        self.crossover_policy = crossover_policy
        self.mutation_policy = mutation_policy
        self.selection_policy = selection_policy
        self.elitism_rate = elitism_rate
        self._listeners: List[ConvergenceListener] = list(convergence_listeners)
        self.generations_evolved = 0

    @property
    def convergence_listeners(self) -> List[ConvergenceListener]:
        return list(self._listeners)

    def add_convergence_listener(self, listener: ConvergenceListener) -> None:
        self._listeners.append(listener)

    def evolve(
        self,
        initial: Population,
        condition: StoppingCondition,
        executor: Optional[Executor] = None,
        max_workers: Optional[int] = None,
    ) -> Population:
        """執行演化流程

        在停止條件滿足前，每個世代先通知監聽器再推進到下一代。

        Args:
            initial: 初始種群
            condition: 停止條件
            executor: 執行繁衍任務的 Executor（可選）；
                未提供時建立 ThreadPoolExecutor 並在結束時關閉
            max_workers: 自建 ThreadPoolExecutor 的執行緒數量

        Returns:
            最終種群

        Raises:
            ReproductionFailureError: 若任一世代的繁衍任務失敗
        """
        if executor is None:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                return self._run(initial, condition, pool)
        return self._run(initial, condition, executor)

    def _run(
        self,
        initial: Population,
        condition: StoppingCondition,
        executor: Executor,
    ) -> Population:
        logger.info("Starting evolution process.")
        self.generations_evolved = 0
        current = initial

        while not condition.is_satisfied(current):
            self._notify_listeners(current)
            current = self.advance_generation(current, executor)
            self.generations_evolved += 1

        logger.info(f"Evolution stopped after {self.generations_evolved} generations.")
        return current

    def _notify_listeners(self, population: Population) -> None:
        for listener in self._listeners:
            listener.notify(self.generations_evolved, population)

    @abstractmethod
    def advance_generation(self, current: Population, executor: Executor) -> Population:
        """由當前種群產生下一代種群"""
