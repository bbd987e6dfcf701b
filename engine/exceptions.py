# engine/exceptions.py

class ForecastError(Exception):
    pass


class InvalidInputError(ForecastError):
    pass


class SingularMatrixError(ForecastError):
    pass


class IndexOutOfRangeError(ForecastError):
    pass
