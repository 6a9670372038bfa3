from typing import List, Optional, Sequence

from services.pronunciation.config import (
    CLARITY_TIP_THRESHOLD,
    FAIR_THRESHOLD,
    GOOD_THRESHOLD,
    OUTSTANDING_THRESHOLD,
    RHYTHM_TIP_THRESHOLD,
)
from services.pronunciation.models import Brand, DetailedScores, Feedback, PhonemeAnnotation, VendorWordScore

NO_ERROR = "None"


def feedback_tier(accuracy: int) -> str:
    if accuracy >= OUTSTANDING_THRESHOLD:
        return "outstanding"
    if accuracy >= GOOD_THRESHOLD:
        return "good"
    if accuracy >= FAIR_THRESHOLD:
        return "fair"
    return "needs_practice"


def build_feedback(
    accuracy: int,
    brand: Brand,
    user_phonemes: Sequence[PhonemeAnnotation] = (),
    detailed_scores: Optional[DetailedScores] = None,
    flagged_words: Sequence[VendorWordScore] = (),
) -> Feedback:
    tier = feedback_tier(accuracy)
    suggestions = _general_suggestions(tier, brand) + _tier_tips(tier, brand)

    incorrect = [p.symbol for p in user_phonemes if not p.correct]
    if incorrect:
        suggestions.append(f"Specific sounds to improve: {', '.join(incorrect)}")

    if detailed_scores is not None:
        if detailed_scores.timing < RHYTHM_TIP_THRESHOLD:
            suggestions.append("Work on your speaking rhythm - try speaking more slowly and deliberately")
        if detailed_scores.clarity < CLARITY_TIP_THRESHOLD:
            suggestions.append("Focus on mouth opening and tongue position for clearer sounds")

    for word in flagged_words:
        if word.error_type != NO_ERROR:
            suggestions.append(f'The speech service flagged "{word.word}": {word.error_type}')

    return Feedback(message=_message(tier, accuracy, brand), suggestions=tuple(suggestions))


def _message(tier: str, accuracy: int, brand: Brand) -> str:
    if tier == "outstanding":
        return (
            f'Outstanding pronunciation of "{brand.name}"! Your accuracy is {accuracy}%. '
            "Your phoneme clarity is excellent, and your timing matches the natural rhythm perfectly."
        )
    if tier == "good":
        return (
            f'Good pronunciation of "{brand.name}"! Your accuracy is {accuracy}%. '
            "Your stress patterns are mostly correct, but some phonemes need refinement."
        )
    if tier == "fair":
        return (
            f'Fair attempt at "{brand.name}". Your accuracy is {accuracy}%. '
            f"Focus on individual phonemes and syllable stress patterns ({brand.pronunciation})."
        )
    return (
        f'Keep practicing "{brand.name}". Your accuracy is {accuracy}%. '
        f"Start with basic phoneme pronunciation: {brand.pronunciation}."
    )


def _general_suggestions(tier: str, brand: Brand) -> List[str]:
    if tier == "needs_practice":
        return [
            f'Practice saying "{brand.name}" slowly: {brand.pronunciation}',
            "Focus on pronouncing each syllable clearly",
            "Try recording yourself and playing it back",
        ]
    if tier == "fair":
        return [
            f"Good effort! Practice the pronunciation: {brand.pronunciation}",
            "Pay attention to stress patterns in the word",
            "Try speaking more slowly and deliberately",
        ]
    if tier == "good":
        return [
            "Almost perfect! Fine-tune your pronunciation",
            "Focus on the subtle sounds you might be missing",
        ]
    return [
        "Excellent pronunciation!",
        "Try practicing other car brand names",
    ]


def _tier_tips(tier: str, brand: Brand) -> List[str]:
    if tier == "outstanding":
        return [
            'Try practicing other challenging car brands like "Lamborghini" or "Koenigsegg"',
            "Focus on maintaining this quality with longer brand names",
        ]
    if tier == "good":
        return [
            "Work on the sounds that scored below 70% confidence",
            f"Practice the pronunciation slowly: {brand.pronunciation}",
            "Record yourself and compare with the reference audio",
        ]
    if tier == "fair":
        return [
            f"Break it down syllable by syllable: {brand.pronunciation}",
            "Practice each sound separately before combining them",
            "Listen to native speakers saying this brand name",
        ]
    return [
        "Focus on mouth position for each sound",
        "Use a mirror to check your mouth movements",
        "Practice with shorter words first",
    ]


def unmatched_feedback(transcript: str, candidates: Sequence[Brand]) -> Feedback:
    names = [b.name for b in candidates]
    message = f'I heard "{transcript}" but couldn\'t match it to a known car brand.'
    if names:
        message += f" Did you mean: {', '.join(names)}?"
    message += " Try saying a clear car brand name."

    suggestions = (
        "Speak more clearly and slowly",
        "Make sure you're saying a car brand name",
        f'Maybe try: "{names[0]}"' if names else "Try popular brands like Tesla, BMW, Mercedes, Toyota",
    )
    return Feedback(message=message, suggestions=suggestions)
