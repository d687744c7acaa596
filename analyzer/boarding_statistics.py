import matplotlib.pyplot as plt


class BoardingStatistics:
    """
    Receives all broker traffic of a boarding run and records it as an
    independent "recorder".

    Broker-fed data:
    - Aisle trajectories per passenger (from 'aisle/status')
    - Seated count over time
    - Board / waiting / seated event times per passenger

    Simulation-only ("God's view") data:
    - Direct access to Passenger objects via register_passengers(), used
      for per-passenger metrics
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.passenger_trajectories = {}  # {passenger_name: [(time, position), ...]}
        self.seated_history = []  # [(time, seated_count)]
        self.passenger_events = {}  # {passenger_name: {'boarded': t, 'waiting': t, 'seated': t}}
        self.boarding_time = None
        self.total_passengers = 0

        # God's view data (simulation-only)
        self.passengers = []

    def start_listening(self):
        """
        Main process to start intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()

            topic = data.get('topic', '')
            message = data.get('message', {})

            if topic == 'aisle/status':
                self._record_status(message)
            elif topic.startswith('passenger/'):
                event_type = topic.split('/', 1)[1]
                name = message.get('passenger_name')
                if name is not None:
                    self.passenger_events.setdefault(name, {})[event_type] = message.get('timestamp')
            elif topic == 'boarding/completed':
                self.boarding_time = message.get('boarding_time')

    def _record_status(self, message):
        timestamp = message.get('timestamp')
        for name, position in message.get('positions', {}).items():
            trajectory = self.passenger_trajectories.setdefault(name, [])
            # Record if not exactly the same as the last data point
            if not trajectory or trajectory[-1][1] != position:
                trajectory.append((timestamp, position))

        seated = message.get('seated_count', 0)
        self.total_passengers = message.get('total_passengers', self.total_passengers)
        if not self.seated_history or self.seated_history[-1][1] != seated:
            self.seated_history.append((timestamp, seated))

    def register_passengers(self, passengers):
        """
        Register passenger objects for detailed metrics collection.

        ⚠️  SIMULATION-ONLY: reads Passenger objects directly.
        """
        self.passengers.extend(passengers)

    def collect_passenger_metrics(self):
        """
        Gather per-passenger metrics from registered passengers.

        Returns:
            dict: {'aisle_time': [...], 'seating_delay': [...], 'total_boarding_time': [...]}
        """
        metrics = {'aisle_time': [], 'seating_delay': [], 'total_boarding_time': []}
        for passenger in self.passengers:
            aisle = passenger.get_aisle_time()
            if aisle is not None:
                metrics['aisle_time'].append(aisle)

            delay = passenger.get_seating_delay()
            if delay is not None:
                metrics['seating_delay'].append(delay)

            total = passenger.get_total_boarding_time()
            if total is not None:
                metrics['total_boarding_time'].append(total)
        return metrics

    def print_passenger_metrics_summary(self):
        """
        Print per-passenger metrics (simulation clock seconds).

        Metrics include:
        - Aisle time (boarding to reaching the seat row)
        - Seating delay (blocking the aisle at the seat row)
        - Total boarding time (boarding to seated)
        """
        print("\n" + "="*80)
        print("   PASSENGER METRICS SUMMARY (SIMULATION ONLY)")
        print("="*80)

        labels = {
            'aisle_time': "Aisle Time (Board to Seat Row)",
            'seating_delay': "Seating Delay (Blocking the Aisle)",
            'total_boarding_time': "Total Boarding Time (Board to Seated)",
        }
        for key, values in self.collect_passenger_metrics().items():
            if not values:
                continue
            print(f"\n{labels[key]}:")
            print(f"  Count:   {len(values):>6} passengers")
            print(f"  Average: {sum(values) / len(values):>6.2f} seconds")
            print(f"  Min:     {min(values):>6.2f} seconds")
            print(f"  Max:     {max(values):>6.2f} seconds")

        if self.boarding_time is not None:
            print(f"\nBoarding completed in {self.boarding_time:.1f} modelled seconds")

        print("="*80)

    def plot_trajectory_diagram(self, output_filename='boarding_trajectory_diagram.png', show=False):
        """Draw aisle position over time for every passenger after the run"""
        print("\n--- Plotting: Boarding Trajectory Diagram ---")
        fig = plt.figure(figsize=(14, 8))

        names = sorted(self.passenger_trajectories.keys())
        cmap = plt.get_cmap('viridis')
        for idx, name in enumerate(names):
            trajectory = self.passenger_trajectories[name]
            if not trajectory:
                continue
            times, positions = zip(*sorted(trajectory, key=lambda x: x[0]))
            color = cmap(idx / max(len(names) - 1, 1))
            plt.plot(times, positions, color=color, linewidth=1.5, alpha=0.8)

            seated_at = self.passenger_events.get(name, {}).get('seated')
            if seated_at is not None:
                plt.scatter(seated_at, positions[-1], color=color, marker='s', s=12)

        plt.title("Boarding Trajectory Diagram (Aisle Position)")
        plt.xlabel("Time (s)")
        plt.ylabel("Aisle Position")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close(fig)

    def plot_seated_progress(self, output_filename='boarding_progress.png', show=False):
        """Draw the number of seated passengers over time"""
        print("\n--- Plotting: Boarding Progress ---")
        fig = plt.figure(figsize=(12, 6))

        if self.seated_history:
            times, seated = zip(*self.seated_history)
            plt.step(times, seated, where='post', linewidth=2)

        plt.title("Boarding Progress")
        plt.xlabel("Time (s)")
        plt.ylabel("Passengers Seated")
        if self.total_passengers:
            plt.ylim(0, self.total_passengers)
        plt.grid(alpha=0.3)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Progress plot saved to: {output_filename}")

        if show:
            plt.show()
        plt.close(fig)
