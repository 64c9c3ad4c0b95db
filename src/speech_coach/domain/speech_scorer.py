"""Core business logic for scoring speech confidence."""

import math

from speech_coach.logging import setup_logging

from .models import AnalysisResult, SpeechMetrics, TranscriptionResult

logger = setup_logging()

FILLER_ENTITY_TYPE = "filler"

SENTIMENT_VALUES = {"POSITIVE": 1.0, "NEUTRAL": 0.5, "NEGATIVE": 0.0}

IDEAL_RATE_MIN = 120
IDEAL_RATE_MAX = 150
FILLER_PENALTY_THRESHOLD = 5
POSITIVE_TONE_THRESHOLD = 0.7

TONE_TIP = "Try a more positive tone to sound confident"
FILLER_TIP = 'Reduce filler words (e.g., "um") for authority'
SLOW_DOWN_TIP = "Slow down to improve clarity"
SPEED_UP_TIP = "Speak faster for more energy"


class SpeechScorer:
    """Derives a 0-100 confidence score and coaching tips from a transcript."""

    def score(self, result: TranscriptionResult) -> AnalysisResult:
        """
        Scores a completed transcription.

        The score blends three terms: sentiment positivity (40%), filler word
        frequency (30%) and how close the speaking rate is to the
        120-150 words per minute band (30%).

        Args:
            result: Structured output of a completed transcription job.

        Returns:
            AnalysisResult with the transcript, confidence and ordered tips.
        """
        metrics = self.measure(result)
        confidence = self._confidence(metrics)
        tips = self._tips(metrics)

        logger.info(
            "Speech scored",
            extra={
                "filler_count": metrics.filler_count,
                "sentiment_score": metrics.sentiment_score,
                "speaking_rate": metrics.speaking_rate,
                "confidence": confidence,
                "tip_count": len(tips),
            },
        )

        return AnalysisResult(transcript=result.text, confidence=confidence, tips=tips)

    def measure(self, result: TranscriptionResult) -> SpeechMetrics:
        """Computes filler count, mean sentiment and words per minute."""
        return SpeechMetrics(
            filler_count=self._filler_count(result),
            sentiment_score=self._sentiment_score(result),
            speaking_rate=self._speaking_rate(result),
        )

    def _filler_count(self, result: TranscriptionResult) -> int:
        return sum(1 for e in result.entities if e.entity_type == FILLER_ENTITY_TYPE)

    def _sentiment_score(self, result: TranscriptionResult) -> float:
        """Mean of POSITIVE=1, NEUTRAL=0.5, NEGATIVE=0; zero without segments."""
        segments = result.sentiment_segments
        if not segments:
            return 0.0
        total = sum(SENTIMENT_VALUES[s.sentiment] for s in segments)
        return total / len(segments)

    def _speaking_rate(self, result: TranscriptionResult) -> float:
        """Words per minute; zero when the duration is unknown or zero."""
        if result.audio_duration <= 0:
            return 0.0
        return len(result.words) / (result.audio_duration / 60)

    def _confidence(self, metrics: SpeechMetrics) -> int:
        filler_term = 100 if metrics.filler_count < FILLER_PENALTY_THRESHOLD else 50
        in_band = IDEAL_RATE_MIN <= metrics.speaking_rate <= IDEAL_RATE_MAX
        rate_term = 100 if in_band else 60

        raw = (
            0.4 * metrics.sentiment_score * 100
            + 0.3 * filler_term
            + 0.3 * rate_term
        )
        # round half up, not Python's banker's rounding
        rounded = math.floor(raw + 0.5)
        return max(0, min(100, rounded))

    def _tips(self, metrics: SpeechMetrics) -> list[str]:
        tips: list[str] = []

        if metrics.sentiment_score < POSITIVE_TONE_THRESHOLD:
            tips.append(TONE_TIP)
        if metrics.filler_count > FILLER_PENALTY_THRESHOLD:
            tips.append(FILLER_TIP)
        if metrics.speaking_rate > IDEAL_RATE_MAX:
            tips.append(SLOW_DOWN_TIP)
        elif metrics.speaking_rate < IDEAL_RATE_MIN:
            tips.append(SPEED_UP_TIP)

        return tips
