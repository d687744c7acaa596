"""
Boarding Statistics Tests

Broker recording, passenger metrics and plotting.
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import pytest
import simpy

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from analyzer.boarding_statistics import BoardingStatistics
from simulator.core.passenger import Passenger
from simulator.core.seat import SeatGrid
from simulator.infrastructure.message_broker import MessageBroker


def replay(messages):
    """Publish (time, topic, message) tuples and return the recorder"""
    env = simpy.Environment()
    broker = MessageBroker(env, log_publish=False)
    stats = BoardingStatistics(env, broker.get_broadcast_pipe())
    env.process(stats.start_listening())

    def publisher():
        for timestamp, topic, message in messages:
            yield env.timeout(timestamp - env.now)
            broker.put(topic, message)

    env.process(publisher())
    env.run()
    return stats


def status(timestamp, positions, seated, total=2):
    return (timestamp, 'aisle/status', {
        'timestamp': timestamp,
        'positions': positions,
        'seated_count': seated,
        'total_passengers': total,
    })


def test_records_trajectories_without_duplicates():
    stats = replay([
        status(0.0, {'R1S0': 50.0}, 0),
        status(0.1, {'R1S0': 60.0}, 0),
        status(0.2, {'R1S0': 60.0, 'R0S0': 50.0}, 0),
        status(0.3, {'R0S0': 50.0}, 1),
    ])
    assert stats.passenger_trajectories['R1S0'] == [(0.0, 50.0), (0.1, 60.0)]
    assert stats.passenger_trajectories['R0S0'] == [(0.2, 50.0)]
    assert stats.seated_history == [(0.0, 0), (0.3, 1)]
    assert stats.total_passengers == 2


def test_records_passenger_events_and_completion():
    stats = replay([
        (0.0, 'passenger/boarded', {'timestamp': 0.0, 'passenger_name': 'R1S0'}),
        (0.5, 'passenger/waiting', {'timestamp': 0.5, 'passenger_name': 'R1S0'}),
        (0.9, 'passenger/seated', {'timestamp': 0.9, 'passenger_name': 'R1S0'}),
        (0.9, 'boarding/completed', {'timestamp': 0.9, 'boarding_time': 18.0}),
    ])
    assert stats.passenger_events['R1S0'] == {'boarded': 0.0, 'waiting': 0.5, 'seated': 0.9}
    assert stats.boarding_time == 18.0


def test_passenger_metrics_from_registered_passengers(capsys):
    grid = SeatGrid(2, 1)
    done = Passenger(1, 0, 100.0, 0.5)
    done.board(50.0, 0.0)
    done.advance(0.5, [done], grid, 0.5)
    done.poll_seating(grid, 1.0)
    unboarded = Passenger(0, 0, 100.0, 0.5)

    stats = BoardingStatistics(simpy.Environment(), None)
    stats.register_passengers([done, unboarded])
    metrics = stats.collect_passenger_metrics()

    assert metrics['aisle_time'] == [pytest.approx(0.5)]
    assert metrics['seating_delay'] == [pytest.approx(0.5)]
    assert metrics['total_boarding_time'] == [pytest.approx(1.0)]

    stats.print_passenger_metrics_summary()
    out = capsys.readouterr().out
    assert "Total Boarding Time" in out
    assert "1 passengers" in out


def test_plots_are_written(tmp_path):
    stats = replay([
        status(0.0, {'R1S0': 50.0}, 0),
        status(0.1, {'R1S0': 70.0}, 0),
        status(0.6, {}, 1),
    ])
    trajectory = tmp_path / "trajectory.png"
    progress = tmp_path / "progress.png"
    stats.plot_trajectory_diagram(str(trajectory))
    stats.plot_seated_progress(str(progress))
    assert trajectory.exists() and trajectory.stat().st_size > 0
    assert progress.exists() and progress.stat().st_size > 0
