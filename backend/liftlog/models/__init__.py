from liftlog.models.user import User
from liftlog.models.workout import Workout
from liftlog.models.exercise_template import ExerciseTemplate
from liftlog.models.exercise import Exercise
from liftlog.models.workout_set import WorkoutSet

__all__ = ["User", "Workout", "ExerciseTemplate", "Exercise", "WorkoutSet"]
