"""
Evaluation context utilities using contextvars.

One context per cart evaluation; the logging filters read from it so every
line emitted during a run carries the same evaluation id and cart token.
"""
from contextvars import ContextVar
import uuid


class EvaluationContext:
    def __init__(self):
        self.evaluation_id: str | None = None
        self.cart_token: str | None = None
        self.campaign: str | None = None


_evaluation_context_var: ContextVar[EvaluationContext] = ContextVar("evaluation_context", default=EvaluationContext())


class _EvaluationContextProxy:
    def __getattr__(self, name):
        return getattr(_evaluation_context_var.get(), name)

    def __setattr__(self, name, value):
        # ensure we set on current context instance
        setattr(_evaluation_context_var.get(), name, value)


evaluation_context = _EvaluationContextProxy()


def set_evaluation_context(ctx: EvaluationContext):
    _evaluation_context_var.set(ctx)


def clear_evaluation_context():
    # Reset to a fresh context
    _evaluation_context_var.set(EvaluationContext())


def start_evaluation(cart_token: str | None = None) -> str:
    ctx = EvaluationContext()
    ctx.evaluation_id = str(uuid.uuid4())
    ctx.cart_token = cart_token
    set_evaluation_context(ctx)
    return ctx.evaluation_id
