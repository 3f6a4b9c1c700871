"""Function helpers.

Example:
    ```python
    from klaw_match.fn import curry

    curry(lambda a, b: a * b)(3)(4)  # 12
    ```
"""

from klaw_match.fn.curry import curry

__all__ = ['curry']
