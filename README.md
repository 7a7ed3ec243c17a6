# slowmokit

A small machine-learning toolkit written in plain Python with no third-party
dependencies. It favours clarity over speed: data is held in ordinary lists
and every algorithm is a few dozen lines.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `slowmokit.model` | `Model`: abstract base class with `fit(x, y)` and `predict(x)` |
| `slowmokit.matrix` | `Matrix`: a dense 2-D matrix with `+`, `-` between matrices and `*` by a matrix or a number |
| `slowmokit.dataio` | `read_csv(path)`: reads an integer CSV file, skipping its header line |
| `slowmokit.randomness` | `random_real(low, high, rng=None)`, `randint(low, high, rng=None)`: uniform random numbers in a closed range |
| `slowmokit.model_selection` | `train_test_split`: shuffles paired data and splits it |
| `slowmokit.metrics` | `accuracy`, `precision`, `recall` |
| `slowmokit.classification_report` | `ClassificationReport`: per-class precision, recall, F1 score and accuracy, and a text table |
| `slowmokit.preprocessing` | `label_encoder`, `one_hot_encoder`, `normalize`, `standardize` |
| `slowmokit.kmeans` | `KMeans`: k-means clustering of 2-D points |
| `slowmokit.linear_regression` | `LinearRegression`: linear regression by batch gradient descent (a `Model`) |
| `slowmokit.bernoulli_nb` | `BernoulliNB`: naive Bayes for binary features and labels 0/1 |
| `slowmokit.gaussian_nb` | `GaussianNB`: Gaussian naive Bayes |
| `slowmokit.knn` | `KNN`: k-nearest-neighbours classifier, euclidean or manhattan distance |

Invalid input raises `ValueError` (or `TypeError` and `IndexError` where
those fit, as in `randomness` and `Matrix`).

## Examples

### K-means clustering

```python
from slowmokit.kmeans import KMeans

points = [
    [0, 0], [1, 1], [-1, -1], [1, 0], [0, 1],
    [5, 5], [6, 6], [4, 4], [5, 6], [6, 5],
    [-4, -4], [-3, -3], [-4, -3], [-3, -4],
]

kmeans = KMeans(3, 20)
kmeans.fit(points)
print(kmeans.labels())
print(kmeans.centroids())
```

`epoch` defaults to 40. Only the first two coordinates of each point are used.
Without `initial_centroids`, `k` distinct input points are picked at random as
starting centroids; pass a `random.Random` instance as `rng` to make that
choice reproducible. `predict(x)` fits on `x` and returns the labels.

### Linear regression

```python
from slowmokit.linear_regression import LinearRegression

x = [[1, 2], [2, 3], [3, 4], [4, 5], [5, 6]]
y = [2, 3, 4, 5, 6]

model = LinearRegression()          # 100 epochs, learning rate 0.01
model.fit(x, y)
print(model.coefficients)           # intercept first, then one weight per feature
print(model.format_coefficients())  # one "Θi: value" line per coefficient
print(model.predict(x))
```

### Classification metrics

```python
from slowmokit.metrics import accuracy, precision, recall
from slowmokit.classification_report import ClassificationReport

pred = [0, 1, 2, 1, 0, 2, 1, 0, 1, 2]
actual = [0, 0, 2, 1, 0, 2, 1, 0, 1, 2]

print(accuracy(pred, actual))
print(precision(pred, actual))
print(recall(pred, actual))

report = ClassificationReport([0, 1, 2, 2, 2], [0, 0, 2, 2, 1])
print(report.f1_score())
report.print_report()               # or report.format() for the table as a string
```

`precision` and `recall` return a dict for the labels `0 .. k-1`, where `k` is
the number of distinct values in `actual`; scores are rounded to two decimals.
`ClassificationReport` keys its results by the distinct true values.

### Train/test split

```python
import random
from slowmokit.model_selection import train_test_split

x_train, y_train, x_test, y_test = train_test_split(
    [[1], [2], [3], [4], [5]], [0, 1, 0, 1, 0], rng=random.Random(0)
)
```

The training part holds `int(len(x) * train_size)` samples (default
`train_size=0.7`) and the rest is the test part; `test_size` does not change
the split.

### Preprocessing

```python
from slowmokit.preprocessing import label_encoder, one_hot_encoder, normalize, standardize

label_encoder(["luffy", "zoro", "sanji", "luffy", "law", "zoro"])   # [0, 1, 2, 0, 3, 1]
one_hot_encoder(["apples", "banana", "mango", "pear"], 4)
normalize([1, 2, 3, 4, 5])          # [0.0, 0.25, 0.5, 0.75, 1.0]
standardize([1, 2, 3, 4, 5])
```

All four return new lists. When every value is equal, `normalize` and
`standardize` return all ones and issue a warning.

### Matrices

```python
from slowmokit.matrix import Matrix

a = Matrix([[1, 2], [3, 4]])
b = Matrix.zeros(2, 2)
c = a * a + b
c[0, 1] = 7                         # element access by (row, column)
print(c)
print(c.shape, c[1], c.tolist())
```

### Random numbers and CSV files

```python
from slowmokit.randomness import random_real, randint
from slowmokit.dataio import read_csv

randint(1, 6)
random_real(0.0, 1.0)
rows = read_csv("data.csv")         # list of integer rows, header skipped
```

### Naive Bayes and nearest neighbours

```python
from slowmokit.bernoulli_nb import BernoulliNB
from slowmokit.gaussian_nb import GaussianNB
from slowmokit.knn import KNN

BernoulliNB().fit_predict([[0, 0], [1, 1]], [0, 1], [1, 1])

GaussianNB().fit_predict(
    [[1, 10], [3, 30], [10, 100], [12, 120]], [0, 0, 1, 1], [11, 110], [0, 1]
)                                   # returns an index into the classes list

knn = KNN()
knn.fit([[4.23, 24.4, 34.24], [2.23, 23.43, 34.23]], [0, 1], 2)
knn.predict([23.23, 34.42, 4.23], 2, "euclidean")
```

`GaussianNB` truncates column means, standard deviations and test features to
integers before evaluating the density. `KNN.predict` keeps the `k` nearest
points, lets the farther half of them (rounded up) vote, and breaks ties
towards the lowest class.

## What it does not do

slowmokit is a library only: it has no command-line program. Data must already
be in Python lists; `read_csv` reads integer tables only and nothing is written
back to files. `KMeans` clusters points in the plane only, and `Matrix` has no
addition or subtraction of a plain number.