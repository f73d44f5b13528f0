import asyncio
import os
import sys

# Add parent directory to path so we can import plates modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from plates.core.enums import ExerciseType
from plates.db.base import prepare_database
from plates.db.session import async_session_maker, engine
from plates.models import Exercise

# name, muscle groups, type, uses body weight
BASE_EXERCISES = [
    ("Bench Press", ["Chest", "Triceps"], ExerciseType.STRENGTH, False),
    ("Incline Dumbbell Press", ["Chest", "Shoulders"], ExerciseType.STRENGTH, False),
    ("Dips", ["Chest", "Triceps"], ExerciseType.STRENGTH, True),
    ("Pull-ups", ["Back", "Biceps"], ExerciseType.STRENGTH, True),
    ("Barbell Row", ["Back"], ExerciseType.STRENGTH, False),
    ("Deadlift", ["Back", "Legs"], ExerciseType.STRENGTH, False),
    ("Squat", ["Legs"], ExerciseType.STRENGTH, False),
    ("Leg Press", ["Legs"], ExerciseType.STRENGTH, False),
    ("Overhead Press", ["Shoulders"], ExerciseType.STRENGTH, False),
    ("Lateral Raise", ["Shoulders"], ExerciseType.STRENGTH, False),
    ("Barbell Curl", ["Biceps"], ExerciseType.STRENGTH, False),
    ("Tricep Pushdown", ["Triceps"], ExerciseType.STRENGTH, False),
    ("Plank", ["Core"], ExerciseType.STRENGTH, True),
    ("Running", ["Cardio"], ExerciseType.CARDIO, False),
    ("Cycling", ["Cardio"], ExerciseType.CARDIO, False),
]


async def main():
    print("Creating tables (if missing)...")
    await prepare_database(engine)

    async with async_session_maker() as session:
        existing = await session.execute(select(Exercise.name).where(Exercise.is_base.is_(True)))
        names = {n.lower() for n in existing.scalars().all()}
        added = 0
        for name, groups, exercise_type, uses_body_weight in BASE_EXERCISES:
            if name.lower() in names:
                continue
            session.add(
                Exercise(
                    name=name,
                    muscle_group=groups,
                    exercise_type=exercise_type,
                    uses_body_weight=uses_body_weight,
                    is_base=True,
                )
            )
            added += 1
        await session.commit()
    print(f"Added {added} base exercises.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
