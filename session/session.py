"""计算器会话：当前表达式、上次结果与历史记录"""
import logging
from numbers import Real

from config.config import SESSION_CONFIG
from core import evaluate
from utils.formatting import format_result
from utils.labels import describe_error

logger = logging.getLogger(__name__)


def _is_number(value):
    return isinstance(value, Real) and not isinstance(value, bool)


class CalculatorSession:
    """
    保存 {expression, lastResult, history} 状态，并在每次修改后持久化

    历史记录为 {'expr': str, 'result': float} 字典，按时间先后追加，
    超过 history_limit 时丢弃最旧的一条。
    """

    def __init__(self, storage=None, history_limit=None, storage_key=None, verbose_errors=False):
        self.storage = storage
        self.history_limit = history_limit or SESSION_CONFIG['history_limit']
        self.storage_key = storage_key or SESSION_CONFIG['storage_key']
        self.verbose_errors = verbose_errors

        self.expression = ''
        self.last_result = 0.0
        self.history = []
        self.last_error = None  # 最近一次求值的错误码

    @property
    def display(self):
        """结果行：有错误时显示错误文案，否则显示上次结果"""
        if self.last_error is not None:
            return describe_error(self.last_error, verbose=self.verbose_errors)
        return format_result(self.last_result)

    # ---------- 持久化 ----------

    def to_dict(self):
        return {
            'expression': self.expression,
            'lastResult': self.last_result,
            'history': [dict(item) for item in self.history],
        }

    def load(self):
        """从存储中恢复状态，只接受类型正确的字段"""
        if self.storage is None:
            return
        saved = self.storage.get([self.storage_key]).get(self.storage_key)
        if not isinstance(saved, dict):
            return

        if isinstance(saved.get('expression'), str):
            self.expression = saved['expression']
        if _is_number(saved.get('lastResult')):
            self.last_result = float(saved['lastResult'])
        if isinstance(saved.get('history'), list):
            history = []
            for item in saved['history']:
                if (isinstance(item, dict) and isinstance(item.get('expr'), str)
                        and _is_number(item.get('result'))):
                    history.append({'expr': item['expr'], 'result': float(item['result'])})
                else:
                    logger.warning(f"Dropping malformed history entry: {item!r}")
            self.history = history[-self.history_limit:]

        logger.info(f"Session restored: {len(self.history)} history entries")

    def persist(self):
        if self.storage is None:
            return
        self.storage.set({self.storage_key: self.to_dict()})

    # ---------- 编辑 ----------

    def append(self, text):
        self.expression += text
        self.last_error = None
        self.persist()

    def backspace(self):
        self.expression = self.expression[:-1]
        self.last_error = None
        self.persist()

    def clear_all(self):
        self.expression = ''
        self.last_result = 0.0
        self.last_error = None
        self.persist()

    def clear_history(self):
        self.history = []
        self.persist()

    # ---------- 求值与历史 ----------

    def _add_to_history(self, expr, result):
        if not expr.strip():
            return
        self.history.append({'expr': expr, 'result': result})
        if len(self.history) > self.history_limit:
            self.history.pop(0)

    def evaluate_expression(self):
        """
        求值当前表达式

        成功：更新上次结果、写入历史并持久化；
        失败：保留表达式不变，结果行显示错误文案。
        """
        outcome = evaluate(self.expression)
        if not outcome.ok:
            self.last_error = outcome.error
            logger.info(f"Evaluation of {self.expression!r} failed: {outcome.error.value}")
            return outcome

        self.last_error = None
        self.last_result = outcome.value
        self._add_to_history(self.expression, outcome.value)
        self.persist()
        return outcome

    def history_newest_first(self):
        return list(reversed(self.history))

    def recall(self, index):
        """按最新在前的顺序取回一条历史记录，恢复其表达式与结果"""
        entries = self.history_newest_first()
        if not 0 <= index < len(entries):
            raise IndexError(f"No history entry at position {index}")
        item = entries[index]
        self.expression = item['expr']
        self.last_result = item['result']
        self.last_error = None
        self.persist()
        return item
