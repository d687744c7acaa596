"""
Simulation Configuration

Cabin geometry, passenger sampling parameters, boarding order policy and
run control for a boarding simulation.
"""

from dataclasses import dataclass, field
from typing import Optional


BOARDING_POLICIES = ("random", "section", "batched_section")


@dataclass
class CabinConfig:
    """Cabin specifications (geometry in simulation units)"""
    num_rows: int = 20
    seats_per_row: int = 4
    start_y: float = 50.0
    row_spacing: float = 10.0
    seat_width: float = 10.0
    seat_height: float = 10.0
    seat_spacing: float = 6.0
    aisle_width: float = 16.0
    seat_start_x: float = 300.0

    def __post_init__(self):
        if self.num_rows < 1:
            raise ValueError("num_rows must be at least 1")
        if self.seats_per_row < 1:
            raise ValueError("seats_per_row must be at least 1")
        if self.seat_width <= 0 or self.seat_height <= 0:
            raise ValueError("seat_width and seat_height must be positive")
        if self.row_spacing < 0 or self.seat_spacing < 0:
            raise ValueError("row_spacing and seat_spacing cannot be negative")
        if self.aisle_width <= 0:
            raise ValueError("aisle_width must be positive")


@dataclass
class PassengerConfig:
    """Passenger sampling distributions"""
    speed_mean: float = 10.0
    speed_std: float = 3.0
    min_speed: float = 5.0
    wait_mean: float = 7.0  # seconds
    wait_std: float = 3.0
    min_wait: float = 1.0
    max_wait: float = 15.0
    scale_factor: float = 20.0

    def __post_init__(self):
        if self.speed_std < 0 or self.wait_std < 0:
            raise ValueError("standard deviations cannot be negative")
        if self.min_speed <= 0:
            raise ValueError("min_speed must be positive")
        if self.min_wait <= 0:
            raise ValueError("min_wait must be positive")
        if self.max_wait < self.min_wait:
            raise ValueError("max_wait cannot be smaller than min_wait")
        if self.scale_factor <= 0:
            raise ValueError("scale_factor must be positive")


@dataclass
class BoardingConfig:
    """Boarding order policy"""
    policy: str = "batched_section"  # random, section, batched_section
    num_sections: int = 8
    people_per_section: int = 3
    shuffle_first: bool = True

    def __post_init__(self):
        if self.policy not in BOARDING_POLICIES:
            raise ValueError(f"policy must be one of {', '.join(BOARDING_POLICIES)}")
        if self.num_sections < 1:
            raise ValueError("num_sections must be at least 1")
        if self.people_per_section < 1:
            raise ValueError("people_per_section must be at least 1")


@dataclass
class AnalysisConfig:
    """Post-run reporting"""
    plot_trajectory: bool = True
    trajectory_filename: str = "boarding_trajectory_diagram.png"
    progress_filename: str = "boarding_progress.png"
    cabin_snapshot_filename: Optional[str] = None
    show_plots: bool = False


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines cabin, passenger, boarding and analysis settings.
    """
    cabin: CabinConfig
    passenger: PassengerConfig
    boarding: BoardingConfig
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    # Simulation control
    random_seed: Optional[int] = None
    time_step: float = 1 / 60  # simulated seconds per host step
    realtime_factor: float = 0.0  # 1.0 = realtime, 0.0 = as fast as possible
    max_simulation_time: Optional[float] = 600.0

    def __post_init__(self):
        if self.time_step <= 0:
            raise ValueError("time_step must be positive")
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")
        if self.max_simulation_time is not None and self.max_simulation_time <= 0:
            raise ValueError("max_simulation_time must be positive")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data)

        cabin_data = sim_data.get('cabin', {})
        cabin = CabinConfig(
            num_rows=cabin_data.get('num_rows', 20),
            seats_per_row=cabin_data.get('seats_per_row', 4),
            start_y=cabin_data.get('start_y', 50.0),
            row_spacing=cabin_data.get('row_spacing', 10.0),
            seat_width=cabin_data.get('seat_width', 10.0),
            seat_height=cabin_data.get('seat_height', 10.0),
            seat_spacing=cabin_data.get('seat_spacing', 6.0),
            aisle_width=cabin_data.get('aisle_width', 16.0),
            seat_start_x=cabin_data.get('seat_start_x', 300.0)
        )

        passenger_data = sim_data.get('passenger', {})
        passenger = PassengerConfig(
            speed_mean=passenger_data.get('speed_mean', 10.0),
            speed_std=passenger_data.get('speed_std', 3.0),
            min_speed=passenger_data.get('min_speed', 5.0),
            wait_mean=passenger_data.get('wait_mean', 7.0),
            wait_std=passenger_data.get('wait_std', 3.0),
            min_wait=passenger_data.get('min_wait', 1.0),
            max_wait=passenger_data.get('max_wait', 15.0),
            scale_factor=passenger_data.get('scale_factor', 20.0)
        )

        boarding_data = sim_data.get('boarding', {})
        boarding = BoardingConfig(
            policy=boarding_data.get('policy', 'batched_section'),
            num_sections=boarding_data.get('num_sections', 8),
            people_per_section=boarding_data.get('people_per_section', 3),
            shuffle_first=boarding_data.get('shuffle_first', True)
        )

        analysis_data = sim_data.get('analysis', {})
        analysis = AnalysisConfig(
            plot_trajectory=analysis_data.get('plot_trajectory', True),
            trajectory_filename=analysis_data.get('trajectory_filename', 'boarding_trajectory_diagram.png'),
            progress_filename=analysis_data.get('progress_filename', 'boarding_progress.png'),
            cabin_snapshot_filename=analysis_data.get('cabin_snapshot_filename'),
            show_plots=analysis_data.get('show_plots', False)
        )

        return cls(
            cabin=cabin,
            passenger=passenger,
            boarding=boarding,
            analysis=analysis,
            random_seed=sim_data.get('random_seed'),
            time_step=sim_data.get('time_step', 1 / 60),
            realtime_factor=sim_data.get('realtime_factor', 0.0),
            max_simulation_time=sim_data.get('max_simulation_time', 600.0)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        result = {
            'simulation': {
                'cabin': {
                    'num_rows': self.cabin.num_rows,
                    'seats_per_row': self.cabin.seats_per_row,
                    'start_y': self.cabin.start_y,
                    'row_spacing': self.cabin.row_spacing,
                    'seat_width': self.cabin.seat_width,
                    'seat_height': self.cabin.seat_height,
                    'seat_spacing': self.cabin.seat_spacing,
                    'aisle_width': self.cabin.aisle_width,
                    'seat_start_x': self.cabin.seat_start_x
                },
                'passenger': {
                    'speed_mean': self.passenger.speed_mean,
                    'speed_std': self.passenger.speed_std,
                    'min_speed': self.passenger.min_speed,
                    'wait_mean': self.passenger.wait_mean,
                    'wait_std': self.passenger.wait_std,
                    'min_wait': self.passenger.min_wait,
                    'max_wait': self.passenger.max_wait,
                    'scale_factor': self.passenger.scale_factor
                },
                'boarding': {
                    'policy': self.boarding.policy,
                    'num_sections': self.boarding.num_sections,
                    'people_per_section': self.boarding.people_per_section,
                    'shuffle_first': self.boarding.shuffle_first
                },
                'analysis': {
                    'plot_trajectory': self.analysis.plot_trajectory,
                    'trajectory_filename': self.analysis.trajectory_filename,
                    'progress_filename': self.analysis.progress_filename,
                    'cabin_snapshot_filename': self.analysis.cabin_snapshot_filename,
                    'show_plots': self.analysis.show_plots
                },
                'time_step': self.time_step,
                'realtime_factor': self.realtime_factor,
                'max_simulation_time': self.max_simulation_time
            }
        }

        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        # Section size is num_rows // num_sections and must not be zero
        if self.boarding.num_sections > self.cabin.num_rows:
            raise ValueError(f"boarding.num_sections ({self.boarding.num_sections}) cannot exceed cabin.num_rows ({self.cabin.num_rows})")
