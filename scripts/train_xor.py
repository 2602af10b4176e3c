#!/usr/bin/env python3
"""Train a 2-h-1 sigmoid network on XOR and print its predictions."""
from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from backprop_nn import Network, NetworkConfig, TrainingConfig
from backprop_nn.tasks import make_xor_dataset, xor_report
from backprop_nn.training import Trainer
from backprop_nn.utils import configure_logging


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--epochs", type=int, default=10_000)
    p.add_argument("--hidden-size", type=int, default=2)
    p.add_argument("--learning-rate", type=float, default=0.5)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--log-every", type=int, default=1_000, help="Epochs between loss evaluations")
    p.add_argument(
        "--updated-weights",
        action="store_true",
        help="Propagate hidden error through the already-updated output weights",
    )
    p.add_argument("--progress", action="store_true", help="Show a progress bar")
    p.add_argument("--plot", type=Path, default=None, help="Save the loss curve to this image path")
    p.add_argument("--out", type=Path, default=None, help="Write a JSON report to this path")
    p.add_argument("--log-level", type=str, default="INFO")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)

    net_config = NetworkConfig(
        input_size=2,
        hidden_size=args.hidden_size,
        output_size=1,
        learning_rate=args.learning_rate,
        seed=args.seed,
        propagate_through_updated_weights=args.updated_weights,
    )
    train_config = TrainingConfig(epochs=args.epochs, log_every=args.log_every, show_progress=args.progress)

    network = Network.from_config(net_config)
    inputs, targets = make_xor_dataset()
    history = Trainer(network, train_config).fit(inputs, targets)

    report = xor_report(network)
    print("Testing XOR:")
    for row, output in report:
        print(f"{row[0]:g} XOR {row[1]:g} = {round(float(output[0]), 3)}")

    if args.plot is not None:
        import matplotlib

        matplotlib.use("Agg")
        from backprop_nn.utils import plot_loss_history

        plot_loss_history(history, args.plot)

    if args.out is not None:
        results = {
            "network": asdict(net_config),
            "training": {"epochs": train_config.epochs, "log_every": train_config.log_every},
            "history": {"epochs": history.epochs, "losses": history.losses},
            "predictions": [
                {"inputs": row.tolist(), "output": output.tolist()} for row, output in report
            ],
        }
        args.out.write_text(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
