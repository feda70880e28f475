from smartlearn.utils.helpers import round_half_up


def _is_option_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


class QuizGrader:
    @staticmethod
    def normalize_answers(answers, question_count):
        """Line answers up with questions by position.

        ``answers`` is either a list or an object keyed by question index (the
        shape the UI builds). Anything that is not an option index becomes None.
        """
        normalized = []
        for idx in range(question_count):
            if isinstance(answers, dict):
                value = answers.get(str(idx))
            else:
                value = answers[idx] if idx < len(answers) else None

            if _is_option_index(value):
                normalized.append(value)
            else:
                normalized.append(None)
        return normalized

    @staticmethod
    def grade(questions, answers):
        normalized = QuizGrader.normalize_answers(answers, len(questions))
        correct_count = sum(
            1 for question, answer in zip(questions, normalized)
            if _is_option_index(question.get("correct")) and answer == question.get("correct")
        )
        score = round_half_up((correct_count / len(questions)) * 100)

        return {
            "score": score,
            "correct_count": correct_count,
            "total_questions": len(questions),
            "answers": normalized,
        }
