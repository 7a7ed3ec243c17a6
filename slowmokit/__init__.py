"""A small, readable machine-learning toolkit: matrices, metrics, preprocessing,
k-means, linear regression, naive Bayes and k-nearest neighbours."""

__version__ = "0.1.0"