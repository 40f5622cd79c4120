import pytest

from iris_data import save_iris_dataset

# Features: [sepal_length, sepal_width, petal_length, petal_width]
SAMPLE_ROWS = [
    "5.1,3.5,1.4,0.2,setosa",
    "4.9,3.0,1.4,0.2,setosa",
    "7.0,3.2,4.7,1.4,versicolor",
    "6.4,3.2,4.5,1.5,versicolor",
    "6.3,3.3,6.0,2.5,virginica",
    "5.8,2.7,5.1,1.9,virginica",
]


@pytest.fixture
def iris_file(tmp_path):
    path = tmp_path / "iris-data.txt"
    save_iris_dataset(str(path))
    return path


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("\n".join(SAMPLE_ROWS) + "\n")
    return path
