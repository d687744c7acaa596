import simpy


class MessageBroker:
    """
    Topic-labelled message bus between the boarding engine and its observers.

    Publishers tag each message with a topic; every message lands on one
    broadcast pipe that BoardingStatistics drains and dispatches by topic.
    """
    def __init__(self, env: simpy.Environment, log_publish: bool = True, quiet_topics=('aisle/status',)):
        """
        Args:
            env (simpy.Environment): SimPy environment
            log_publish (bool): Print a trace line for each publish
            quiet_topics: Topics never traced (high-frequency status traffic)
        """
        self.env = env
        self.log_publish = log_publish
        self.quiet_topics = set(quiet_topics)
        self.broadcast_pipe = simpy.Store(self.env)

    def put(self, topic: str, message):
        """Publish a message under a topic"""
        if self.log_publish and topic not in self.quiet_topics:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        return self.broadcast_pipe.put({'topic': topic, 'message': message})

    def get_broadcast_pipe(self) -> simpy.Store:
        return self.broadcast_pipe
