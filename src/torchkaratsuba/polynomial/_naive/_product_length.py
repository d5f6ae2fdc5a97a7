def product_length(a_length: int, b_length: int) -> int:
    """Number of coefficients in the product of two polynomials.

    A degree ``a_length - 1`` polynomial times a degree ``b_length - 1``
    polynomial has degree ``a_length + b_length - 2``, so the output buffer
    of every multiply kernel needs at least ``a_length + b_length - 1``
    coefficients.

    Parameters
    ----------
    a_length, b_length : int
        Operand lengths, both at least 1.

    Returns
    -------
    int
        Required output length.

    Examples
    --------
    >>> product_length(2, 3)
    4
    """
    return a_length + b_length - 1
