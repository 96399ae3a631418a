"""
世代推進器 (Generation Advancer)

以精英保留加上並行產生的子代組成下一代種群。
每個繁衍任務執行 選擇 -> 交叉 -> 突變，產生一對子代。
"""

from concurrent.futures import Executor, Future, wait
from typing import List, Sequence
import logging

from .crossover import CrossoverPolicy
from .engine import AbstractGeneticAlgorithm, GeneticAlgorithmConfig
from .exceptions import ReproductionFailureError, validate_rate
from .listeners import ConvergenceListener
from .models import ChromosomePair
from .mutation import MutationPolicy
from .population import Population
from .selection import SelectionPolicy


logger = logging.getLogger(__name__)


class GeneticAlgorithm(AbstractGeneticAlgorithm):
    """遺傳演算法

    交叉率與突變率在建構時驗證，之後不可變更；
    是否真的交叉或突變由對應策略依比率決定，這裡只負責轉交。

    Attributes:
        crossover_rate: 交叉率 [0, 1]
        mutation_rate: 突變率 [0, 1]
    """

    def __init__(
        self,
        crossover_policy: CrossoverPolicy,
        crossover_rate: float,
        mutation_policy: MutationPolicy,
        mutation_rate: float,
        selection_policy: SelectionPolicy,
        elitism_rate: float,
        *convergence_listeners: ConvergenceListener,
    ):
        """初始化遺傳演算法

        Args:
            crossover_policy: 交叉策略
            crossover_rate: 交叉率 (0-1 inclusive)
            mutation_policy: 突變策略
            mutation_rate: 突變率 (0-1 inclusive)
            selection_policy: 選擇策略
            elitism_rate: 精英保留率，由種群容器驗證
            *convergence_listeners: 收斂監聽器（可選）

        Raises:
            OutOfRangeError: 若 crossover_rate 或 mutation_rate 不在 [0, 1] 範圍內
        """
        super().__init__(
            crossover_policy,
            mutation_policy,
            selection_policy,
            elitism_rate,
            *convergence_listeners,
        )

        validate_rate("crossover_rate", crossover_rate)
        validate_rate("mutation_rate", mutation_rate)
        self._crossover_rate = crossover_rate
        self._mutation_rate = mutation_rate

    @classmethod
    def from_config(
        cls,
        config: GeneticAlgorithmConfig,
        crossover_policy: CrossoverPolicy,
        mutation_policy: MutationPolicy,
        selection_policy: SelectionPolicy,
        *convergence_listeners: ConvergenceListener,
    ) -> "GeneticAlgorithm":
        """由演化配置建立遺傳演算法"""
        return cls(
            crossover_policy,
            config.crossover_rate,
            mutation_policy,
            config.mutation_rate,
            selection_policy,
            config.elitism_rate,
            *convergence_listeners,
        )

    @property
    def crossover_rate(self) -> float:
        return self._crossover_rate

    @property
    def mutation_rate(self) -> float:
        return self._mutation_rate

    def advance_generation(self, current: Population, executor: Executor) -> Population:
        """推進到下一代

        1. 由 current 取得已植入精英個體的下一代容器
        2. 剩餘空位的一半（向下取整）即為要產生的子代配對數
        3. 每對子代提交一個繁衍任務到 executor
        4. 按提交順序等待結果，依序插入 first 與 second
        5. 任一任務失敗則整個步驟失敗，不返回部分結果

        剩餘空位為奇數時，下一代會比容量少一個個體。

        Args:
            current: 當前種群（只讀，不會被修改）
            executor: 執行繁衍任務的 Executor

        Returns:
            下一代種群

        Raises:
            ReproductionFailureError: 若任一繁衍任務失敗或被取消
        """
        logger.debug("Reproducing next generation.")
        next_generation = current.next_generation_container(self.elitism_rate)

        slots_remaining = next_generation.capacity - next_generation.size
        pairs_to_produce = slots_remaining // 2

        futures = self._dispatch(current, executor, pairs_to_produce)

        index = 0
        try:
            for index, future in enumerate(futures):
                try:
                    pair = future.result()
                except Exception as exc:
                    logger.error(f"Reproduction task {index} failed: {exc!r}")
                    raise ReproductionFailureError(exc, index) from exc

                next_generation.insert(pair.first)
                next_generation.insert(pair.second)
        except BaseException:
            # 中斷或插入失敗也不能留下未觀察的任務
            self._drain(futures[index + 1:])
            raise

        logger.debug(f"New generation size: {next_generation.size}")
        return next_generation

    def _dispatch(
        self,
        current: Population,
        executor: Executor,
        pairs_to_produce: int,
    ) -> List[Future]:
        """提交繁衍任務，返回按提交順序排列的 Future 列表"""
        futures: List[Future] = []
        for _ in range(pairs_to_produce):
            try:
                futures.append(executor.submit(self._reproduce, current))
            except Exception as exc:
                logger.error(f"Failed to submit reproduction task {len(futures)}: {exc!r}")
                self._drain(futures)
                raise ReproductionFailureError(exc, len(futures)) from exc
        return futures

    def _reproduce(self, current: Population) -> ChromosomePair:
        """單一繁衍任務：選擇 -> 交叉 -> 突變"""
        trace = logger.isEnabledFor(logging.DEBUG)

        # 選擇親代（只從當前種群）
        pair = self.selection_policy.select(current)
        if trace:
            logger.debug(f"Selected chromosomes: {pair!r}")

        # 交叉產生兩個子代
        pair = self.crossover_policy.crossover(pair.first, pair.second, self._crossover_rate)
        if trace:
            logger.debug(f"Offspring after crossover: {pair!r}")

        # 分別突變兩個子代
        pair = ChromosomePair(
            self.mutation_policy.mutate(pair.first, self._mutation_rate),
            self.mutation_policy.mutate(pair.second, self._mutation_rate),
        )
        if trace:
            logger.debug(f"Offspring after mutation: {pair!r}")

        return pair

    @staticmethod
    def _drain(futures: Sequence[Future]) -> None:
        """取消尚未開始的任務，並等待執行中的任務結束

        已取消的 Future 不會被 wait() 視為完成，只等待無法取消者。
        """
        running = [future for future in futures if not future.cancel()]
        wait(running)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(crossover_rate={self._crossover_rate}, "
            f"mutation_rate={self._mutation_rate}, elitism_rate={self.elitism_rate})"
        )
