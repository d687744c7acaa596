import sys

import simpy

# Configuration
from config import load_simulation_config

# Simulator components
from simulator.core.aisle import initialize
from simulator.core.boarding_process import BoardingProcess
from simulator.core.parameters import ModelParameters
from simulator.core.seat import CabinLayout
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment

# Boarding order
from boarding_order import create_order_policy

# Analyzer and rendering
from analyzer.boarding_statistics import BoardingStatistics
from visualizer.cabin_renderer import CabinRenderer

DEFAULT_CONFIG_PATH = "scenarios/batched_section.yaml"


def run_simulation(sim_config_path=DEFAULT_CONFIG_PATH, overrides=None):
    """
    Set up and run one boarding simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file
        overrides: Nested settings applied on top of the scenario file

    Returns:
        Boarding time in modelled seconds, or None if the run timed out
    """
    print("--- Loading Configuration ---")
    sim_config = load_simulation_config(sim_config_path, overrides)
    print(f"Simulation Config: {sim_config_path}")

    NUM_ROWS = sim_config.cabin.num_rows
    SEATS_PER_ROW = sim_config.cabin.seats_per_row

    # Single random stream for sampling and shuffling
    params = ModelParameters.from_config(sim_config.passenger, seed=sim_config.random_seed)
    if sim_config.random_seed is not None:
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        print("Random seed not set - results will vary")

    print("\n--- Simulation Setup ---")
    if sim_config.realtime_factor > 0:
        env = RealtimeEnvironment(speed_factor=sim_config.realtime_factor)
        print(f"Simulation speed: {sim_config.realtime_factor}x (1.0 = real-time)")
    else:
        env = simpy.Environment()
    broker = MessageBroker(env)

    sim_stats = BoardingStatistics(env, broker.get_broadcast_pipe())
    env.process(sim_stats.start_listening())

    simulator = initialize(NUM_ROWS, SEATS_PER_ROW, params,
                           layout=CabinLayout.from_config(sim_config.cabin),
                           broker=broker)
    print(f"Cabin created: {simulator.seat_grid}, aisle origin at ({simulator.origin_x}, {simulator.origin_y})")

    policy = create_order_policy(sim_config.boarding, NUM_ROWS)
    simulator.apply_order_policy(policy, params.rng)
    sim_stats.register_passengers(simulator.passengers)

    boarding = BoardingProcess(env, simulator, params.scale_factor,
                               time_step=sim_config.time_step,
                               max_simulation_time=sim_config.max_simulation_time,
                               broker=broker)

    print("\n--- Simulation Start ---")
    # Runs until the boarding process returns and the statistics listener
    # has drained every pending broadcast
    env.run()
    boarding_time = boarding.process.value
    print("--- Simulation End ---")

    print("\n" + "="*80)
    print(f"📊 BOARDING METRICS ({policy.get_policy_name()})")
    print("="*80)
    sim_stats.print_passenger_metrics_summary()

    analysis = sim_config.analysis
    if analysis.plot_trajectory:
        sim_stats.plot_trajectory_diagram(analysis.trajectory_filename, show=analysis.show_plots)
        sim_stats.plot_seated_progress(analysis.progress_filename, show=analysis.show_plots)
    if analysis.cabin_snapshot_filename:
        CabinRenderer(simulator).save_snapshot(analysis.cabin_snapshot_filename, show=analysis.show_plots)

    return boarding_time


def main():
    # Usage: boardsim [scenario.yaml] [random_seed]
    sim_config_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH
    overrides = {"random_seed": int(sys.argv[2])} if len(sys.argv) > 2 else None
    boarding_time = run_simulation(sim_config_path=sim_config_path, overrides=overrides)
    return 0 if boarding_time is not None else 1


if __name__ == '__main__':
    sys.exit(main())
