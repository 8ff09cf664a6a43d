"""
data/sample_questions.py - built-in question table

Placeholder content used when no QUESTION_BANK_PATH is configured.
"""

from topic_quiz.models.question_model import Question

# ── mathematics (default topic) ──────────────────────────────────────────────
MATHEMATICS: list[Question] = [
    Question(id=1, question="What is the value of 7 × 8?",
             options=["48", "54", "56", "62"], correct=2, category="mathematics"),
    Question(id=2, question="What is the square root of 144?",
             options=["10", "12", "14", "16"], correct=1, category="mathematics"),
    Question(id=3, question="What is 25% of 80?",
             options=["15", "20", "25", "30"], correct=1, category="mathematics"),
    Question(id=4, question="What is the sum of angles in a triangle?",
             options=["90°", "180°", "270°", "360°"], correct=1, category="mathematics"),
    Question(id=5, question="What is 15 ÷ 3?",
             options=["3", "5", "7", "9"], correct=1, category="mathematics"),
    Question(id=6, question="What is 2³?",
             options=["6", "8", "9", "12"], correct=1, category="mathematics"),
    Question(id=7, question="Which of these is a prime number?",
             options=["1", "4", "7", "10"], correct=2, category="mathematics"),
    Question(id=8, question="What is 50% of 200?",
             options=["50", "75", "100", "150"], correct=2, category="mathematics"),
    Question(id=9, question="What is the next number: 2, 4, 6, 8, ?",
             options=["9", "10", "11", "12"], correct=1, category="mathematics"),
    Question(id=10, question="What is 12 × 12?",
             options=["144", "156", "168", "180"], correct=0, category="mathematics"),
    Question(id=11, question="What is 100 - 45?",
             options=["45", "55", "65", "75"], correct=1, category="mathematics"),
    Question(id=12, question="What is the LCM of 4 and 6?",
             options=["12", "24", "6", "8"], correct=0, category="mathematics"),
    Question(id=13, question="What is 3⁴?",
             options=["12", "27", "81", "64"], correct=2, category="mathematics"),
    Question(id=14, question="What is the median of 2, 4, 6, 8, 10?",
             options=["4", "6", "8", "10"], correct=1, category="mathematics"),
    Question(id=15, question="What is 99 ÷ 9?",
             options=["10", "11", "12", "13"], correct=1, category="mathematics"),
]

# ── science ──────────────────────────────────────────────────────────────────
# fewer than 10 questions on purpose: larger counts get all of them
SCIENCE: list[Question] = [
    Question(id=101, question="What is the chemical symbol for water?",
             options=["O2", "H2O", "CO2", "NaCl"], correct=1, category="science"),
    Question(id=102, question="Which planet is known as the Red Planet?",
             options=["Venus", "Jupiter", "Mars", "Saturn"], correct=2, category="science"),
    Question(id=103, question="What gas do plants absorb from the air?",
             options=["Oxygen", "Nitrogen", "Carbon dioxide", "Helium"], correct=2, category="science"),
    Question(id=104, question="At what temperature does water boil at sea level?",
             options=["90 °C", "100 °C", "110 °C", "120 °C"], correct=1, category="science"),
    Question(id=105, question="What is the powerhouse of the cell?",
             options=["Nucleus", "Ribosome", "Mitochondrion", "Golgi apparatus"], correct=2,
             category="science"),
    Question(id=106, question="How many bones are in the adult human body?",
             options=["186", "206", "226", "246"], correct=1, category="science"),
    Question(id=107, question="What force keeps the planets in orbit around the Sun?",
             options=["Magnetism", "Friction", "Gravity", "Inertia"], correct=2, category="science"),
]

SAMPLE_QUESTIONS: dict[str, list[Question]] = {
    "mathematics": MATHEMATICS,
    "science": SCIENCE,
}
