# Stampede CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""debug.py"""
from stampede.context import ExecutionContext
from stampede.hook_manager import HookManager, HookType
from stampede.logger import logger


def log_before(context: ExecutionContext):
    """Log the start of an action."""
    logger.info("[%s] Starting -> %s", context.name, context.signature)


def log_success(context: ExecutionContext):
    """Log the successful completion of an action."""
    logger.debug("[%s] Success -> Status: %s", context.name, context.status)


def log_after(context: ExecutionContext):
    """Log the completion of an action, regardless of success or failure."""
    logger.debug("[%s] Finished in %.3fs", context.name, context.duration)


def log_error(context: ExecutionContext):
    """Log a failed action, either a raised exception or a non-zero status."""
    if context.exception is not None:
        logger.error(
            "[%s] Error (%s): %s",
            context.name,
            type(context.exception).__name__,
            context.exception,
            exc_info=context.exception,
        )
    else:
        logger.error("[%s] Failed with status %s", context.name, context.status)


def register_debug_hooks(hooks: HookManager):
    hooks.register(HookType.BEFORE, log_before)
    hooks.register(HookType.AFTER, log_after)
    hooks.register(HookType.ON_SUCCESS, log_success)
    hooks.register(HookType.ON_ERROR, log_error)
