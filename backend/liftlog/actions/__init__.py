from liftlog.actions.context import ActionContext
from liftlog.actions.workouts import (
    create_workout_action,
    delete_workout_action,
    update_workout_action,
)
from liftlog.actions.exercises import (
    add_exercise_action,
    add_set_action,
    delete_exercise_action,
    delete_set_action,
    update_exercise_action,
    update_set_action,
)

__all__ = [
    "ActionContext",
    "create_workout_action",
    "update_workout_action",
    "delete_workout_action",
    "add_exercise_action",
    "update_exercise_action",
    "delete_exercise_action",
    "add_set_action",
    "update_set_action",
    "delete_set_action",
]
