from abc import ABC, abstractmethod


class Function(ABC):
    '''
    base class for one-dimensional functions that can be integrated

    Methods
    -------
    evaluate(x)
        the value of the function at x
        MUST be implemented by subclasses
        input : float or numpy.ndarray
        return : float, or numpy.ndarray of the same shape as x

    antiderivative()
        a new Function whose derivative is this one,
        with zero constant of integration
        MUST be implemented by subclasses

    describe()
        human readable label of the function
        MUST be implemented by subclasses
    '''

    @abstractmethod
    def evaluate(self, x):
        """
        Argument
        --------
        x : float or numpy.ndarray
            the point(s) at which the function is evaluated

        Return
        ------
        float or numpy.ndarray
            f(x), with the same shape as x when x is an array
        """
        pass

    @abstractmethod
    def antiderivative(self) -> "Function":
        pass

    @abstractmethod
    def describe(self) -> str:
        pass

    def __call__(self, x):
        return self.evaluate(x)

    def __str__(self) -> str:
        return self.describe()
