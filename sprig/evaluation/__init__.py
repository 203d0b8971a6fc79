from sprig.evaluation.evaluator import evaluate
from sprig.evaluation.block import execute_block
from sprig.evaluation.apply import apply, invoke

__all__ = ["evaluate", "execute_block", "apply", "invoke"]
