from functools import wraps

from woocommerce.constants import ModelMethod


def validate_method_for_model(method: ModelMethod):
    """Checks ``method`` against the ``ALLOWED_METHODS`` of the manager's model before calling the operation"""
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            self.validate_model_method(method)
            return func(self, *args, **kwargs)
        return wrapper
    return decorator
