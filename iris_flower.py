"""
Interactive Iris flower classifier.

How to use:
  python iris_flower.py
  python iris_flower.py --data iris-data.txt
  python iris_flower.py --export-iris iris-data.txt

The script:
- Asks for the data file (a period means iris-data.txt in the working directory)
- Trains a linear classifier on the labeled rows
- Asks for the four measurements of a new flower and prints its predicted type
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List

import click
import pandas as pd

from iris_data import load_data, make_sample, resolve_data_path, save_iris_dataset
from iris_model import IrisModel, train_model

logger = logging.getLogger(__name__)

PATH_PROMPT = (
    "Enter data path. If no path is provided, the program will look for "
    "\"iris-data.txt\" in the current working directory. "
    "Enter period if you do not wish to provide path: "
)
MEASUREMENT_PROMPTS = [
    "Enter Sepal Length: ",
    "Enter Sepal Width: ",
    "Enter Petal Length: ",
    "Enter Petal Width: ",
]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------- USER INPUT ----------------
def ask_data_path() -> str:
    entry = input(PATH_PROMPT)
    click.echo("")
    return resolve_data_path(entry)


def read_sample() -> pd.DataFrame:
    """Four blocking prompts; a non-numeric answer raises ValueError."""
    sl = float(input(MEASUREMENT_PROMPTS[0]))
    sw = float(input(MEASUREMENT_PROMPTS[1]))
    pl = float(input(MEASUREMENT_PROMPTS[2]))
    pw = float(input(MEASUREMENT_PROMPTS[3]))
    return make_sample(sl, sw, pl, pw)


# ---------------- MAIN FLOW ----------------
def train(path: str, delimiter: str = ",", random_state: int | None = None) -> IrisModel:
    records = load_data(path, delimiter=delimiter)
    click.secho("Training the model...", fg="blue")
    model = train_model(records, random_state=random_state)
    click.secho("Training complete.\n", fg="green")
    return model


def run(args: argparse.Namespace) -> str:
    path = resolve_data_path(args.data) if args.data is not None else ask_data_path()
    logger.info("Using data file %s", path)

    model = train(path, delimiter=args.delimiter, random_state=args.random_state)

    sample = read_sample()
    label = model.predict_one(sample)
    click.echo("Predicted flower type is: " + click.style(label, fg="magenta"))
    return label


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train a linear Iris classifier and predict one flower.")
    parser.add_argument("--data", default=None,
                        help="Data file to train on. Prompted for when omitted; '.' means iris-data.txt.")
    parser.add_argument("--delimiter", default=",", help="Field separator of the data file.")
    parser.add_argument("--random-state", type=int, default=None, help="Seed for the solver's shuffling.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Diagnostic logging level.")
    parser.add_argument("--export-iris", metavar="PATH", default=None,
                        help="Write the bundled Iris dataset to PATH and exit.")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    try:
        if args.export_iris:
            rows = save_iris_dataset(args.export_iris, delimiter=args.delimiter)
            click.echo(f"Saved {rows} rows to {args.export_iris}")
        else:
            run(args)
    except Exception as e:
        click.secho(str(e) or type(e).__name__, fg="red")
        logger.debug("Run aborted", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
