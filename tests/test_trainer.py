import logging

import numpy as np
import pytest

from backprop_nn import EarlyStoppingConfig, InvalidArgument, Network, TrainingConfig
from backprop_nn.tasks import make_xor_dataset
from backprop_nn.training import Trainer, mean_squared_error


class RecordingNetwork:
    """Stands in for :class:`Network` and records the order of training calls."""

    input_size = 2
    output_size = 1

    def __init__(self) -> None:
        self.calls = []

    def train_step(self, inputs, targets) -> None:
        self.calls.append((tuple(inputs), tuple(targets)))

    def predict(self, inputs):
        return np.zeros(1)


def test_fit_visits_examples_in_order_each_epoch() -> None:
    network = RecordingNetwork()
    inputs, targets = make_xor_dataset()
    Trainer(network, TrainingConfig(epochs=3, log_every=1)).fit(inputs, targets)
    expected = [(tuple(x), tuple(t)) for x, t in zip(inputs, targets)] * 3
    assert network.calls == expected


def test_history_records_each_evaluation() -> None:
    network = RecordingNetwork()
    inputs, targets = make_xor_dataset()
    history = Trainer(network, TrainingConfig(epochs=25, log_every=10)).fit(inputs, targets)
    assert history.epochs == [10, 20, 25]
    assert history.losses == [0.5, 0.5, 0.5]
    assert history.stopped_early is False


def test_mean_squared_error_matches_manual_value() -> None:
    network = Network(2, 2, 1, rng=np.random.default_rng(0))
    inputs, targets = make_xor_dataset()
    manual = np.mean([(t[0] - network.predict(x)[0]) ** 2 for x, t in zip(inputs, targets)])
    assert mean_squared_error(network, inputs, targets) == pytest.approx(manual)
    assert Trainer(network).evaluate(inputs.tolist(), targets.tolist()) == pytest.approx(manual)


def test_training_reduces_loss() -> None:
    network = Network(2, 3, 1, rng=np.random.default_rng(1))
    inputs, targets = make_xor_dataset()
    trainer = Trainer(network, TrainingConfig(epochs=2_000, log_every=500))
    start = trainer.evaluate(inputs, targets)
    history = trainer.fit(inputs, targets)
    assert history.losses[-1] < start
    assert trainer.epoch == 2_000


def test_target_loss_stops_training() -> None:
    network = Network(2, 2, 1, rng=np.random.default_rng(2))
    inputs, targets = make_xor_dataset()
    config = TrainingConfig(epochs=100, log_every=5, early_stopping=EarlyStoppingConfig(target_loss=1.0))
    trainer = Trainer(network, config)
    history = trainer.fit(inputs, targets)
    assert history.epochs == [5]
    assert history.stopped_early is True
    assert trainer.epoch == 5


def test_patience_stops_training_without_improvement() -> None:
    network = RecordingNetwork()
    inputs, targets = make_xor_dataset()
    config = TrainingConfig(
        epochs=100,
        log_every=5,
        early_stopping=EarlyStoppingConfig(patience=2, min_delta=0.0),
    )
    history = Trainer(network, config).fit(inputs, targets)
    assert history.epochs == [5, 10, 15]
    assert history.stopped_early is True
    assert len(network.calls) == 15 * 4


def test_fit_logs_progress(caplog) -> None:
    network = RecordingNetwork()
    inputs, targets = make_xor_dataset()
    with caplog.at_level(logging.INFO, logger="backprop_nn"):
        Trainer(network, TrainingConfig(epochs=2, log_every=1)).fit(inputs, targets)
    messages = [record.getMessage() for record in caplog.records]
    assert "epoch 1/2, loss 0.500000" in messages
    assert "epoch 2/2, loss 0.500000" in messages


def test_fit_with_progress_bar() -> None:
    network = RecordingNetwork()
    inputs, targets = make_xor_dataset()
    history = Trainer(network, TrainingConfig(epochs=4, log_every=2, show_progress=True)).fit(inputs, targets)
    assert history.epochs == [2, 4]


@pytest.mark.parametrize(
    "inputs, targets",
    [
        ([[0.0, 0.0], [1.0, 1.0]], [[0.0]]),
        ([], []),
        ([[0.0, 0.0, 0.0]], [[0.0]]),
        ([[0.0, 0.0]], [[0.0, 1.0]]),
        ([0.0, 0.0], [0.0]),
        ([[0.0, 0.0], [1.0]], [[0.0], [1.0]]),
        ([["0", "1"]], [["1"]]),
    ],
)
def test_invalid_datasets_rejected_before_training(inputs, targets) -> None:
    network = Network(2, 2, 1, rng=np.random.default_rng(3))
    before = network.parameters()
    with pytest.raises(InvalidArgument):
        Trainer(network, TrainingConfig(epochs=1)).fit(inputs, targets)
    after = network.parameters()
    for name in before:
        np.testing.assert_array_equal(before[name], after[name])
