"""Static exercise catalog.

Catalog
-------
    warmup-1        Warm-up Technique     warm-up       beginner
    technique-1     Technique             technique     beginner
    technique-2     Cross                 technique     intermediate
    combinations-1  Jab                   combinations  intermediate
    technique-3     Shadow Boxing         technique     advanced

Entries are immutable; a workout plan references them by object, and
saved sessions keep only ``id`` and ``name``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Difficulty(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    PROFESSIONAL = "professional"


class ExerciseCategory(Enum):
    WARMUP = "warmup"
    TECHNIQUE = "technique"
    STRENGTH = "strength"
    CARDIO = "cardio"
    COOLDOWN = "cooldown"
    STRETCHING = "stretching"
    COMBINATIONS = "combinations"


class MuscleGroup(Enum):
    ARMS = "arms"
    SHOULDERS = "shoulders"
    CHEST = "chest"
    BACK = "back"
    CORE = "core"
    LEGS = "legs"
    FULL_BODY = "full_body"


@dataclass(frozen=True)
class Exercise:
    id: str
    name: str
    description: str
    instructions: str
    category: ExerciseCategory
    difficulty: Difficulty
    target_muscles: tuple[MuscleGroup, ...] = ()
    duration: int | None = None          # seconds
    repetitions: int | None = None
    sets: int | None = None
    rest_between_sets: int | None = None  # seconds
    video_url: str | None = None
    tips: tuple[str, ...] = ()
    common_mistakes: tuple[str, ...] = ()
    equipment: tuple[str, ...] = ()

    @property
    def display_format(self) -> str:
        """``"3 × 10"`` for sets of reps, ``"1 min 5 sec"`` for timed work."""
        if self.repetitions is not None and self.sets is not None:
            return f"{self.sets} × {self.repetitions}"
        if self.duration is not None:
            minutes, seconds = divmod(self.duration, 60)
            if minutes > 0:
                return f"{minutes} min {seconds} sec"
            return f"{seconds} sec"
        return "Free form"


_GLOVES = ("Boxing gloves", "Hand wraps")

EXERCISES: tuple[Exercise, ...] = (
    Exercise(
        id="warmup-1",
        name="Warm-up Technique",
        description="Light footwork and basic strikes to raise the pulse",
        instructions="Take your fighting stance and bounce on the balls of your feet",
        category=ExerciseCategory.WARMUP,
        difficulty=Difficulty.BEGINNER,
        target_muscles=(MuscleGroup.LEGS, MuscleGroup.CORE),
        duration=10,
        repetitions=10,
        sets=3,
        rest_between_sets=30,
        video_url="https://www.youtube.com/watch?v=FJmRQ5iTXKE",
        tips=("Start with easy hops",),
        common_mistakes=("Jumping too high",),
        equipment=_GLOVES,
    ),
    Exercise(
        id="technique-1",
        name="Technique",
        description="Fundamental boxing technique",
        instructions="Take your fighting stance",
        category=ExerciseCategory.TECHNIQUE,
        difficulty=Difficulty.BEGINNER,
        target_muscles=(MuscleGroup.ARMS, MuscleGroup.SHOULDERS),
        duration=10,
        repetitions=10,
        sets=3,
        rest_between_sets=30,
        video_url="https://www.youtube.com/watch?v=1D9v6KtBQrk",
        tips=("Keep the rear hand at your chin", "Turn the fist over at the end of the punch"),
        common_mistakes=("Dropping the rear hand",),
        equipment=_GLOVES,
    ),
    Exercise(
        id="technique-2",
        name="Cross",
        description="The rear straight punch",
        instructions="Throw from your fighting stance, rotating through the hips",
        category=ExerciseCategory.TECHNIQUE,
        difficulty=Difficulty.INTERMEDIATE,
        target_muscles=(MuscleGroup.ARMS, MuscleGroup.SHOULDERS),
        duration=15,
        repetitions=8,
        sets=3,
        rest_between_sets=30,
        video_url="https://www.youtube.com/watch?v=2Xo3NJ7LCCw",
        tips=("Drive the rotation from the hips", "Keep your guard up"),
        common_mistakes=("No torso rotation",),
        equipment=_GLOVES,
    ),
    Exercise(
        id="combinations-1",
        name="Jab",
        description="Lead-hand jab drills",
        instructions="Snap the jab with your lead hand and return it to guard",
        category=ExerciseCategory.COMBINATIONS,
        difficulty=Difficulty.INTERMEDIATE,
        target_muscles=(MuscleGroup.ARMS, MuscleGroup.SHOULDERS),
        duration=20,
        repetitions=5,
        sets=3,
        rest_between_sets=30,
        video_url="https://www.youtube.com/watch?v=7v0_uipNGao",
        tips=("Start slowly", "Focus on accuracy"),
        common_mistakes=("Pausing between punches",),
        equipment=_GLOVES + ("Heavy bag",),
    ),
    Exercise(
        id="technique-3",
        name="Shadow Boxing",
        description="Continuous movement against an imagined opponent",
        instructions="Keep moving and mix offence with defence",
        category=ExerciseCategory.TECHNIQUE,
        difficulty=Difficulty.ADVANCED,
        target_muscles=(MuscleGroup.FULL_BODY,),
        duration=45,
        repetitions=2,
        sets=2,
        rest_between_sets=60,
        video_url="https://www.youtube.com/watch?v=kqB19LuJ5jE",
        tips=("Picture a real opponent", "Vary your pace"),
        common_mistakes=("No defensive movement",),
        equipment=("Boxing gloves (optional)",),
    ),
)

_BY_ID: dict[str, Exercise] = {exercise.id: exercise for exercise in EXERCISES}


def get_exercise(exercise_id: str) -> Exercise | None:
    return _BY_ID.get(exercise_id)


def exercises_in_category(category: ExerciseCategory) -> list[Exercise]:
    return [exercise for exercise in EXERCISES if exercise.category == category]
