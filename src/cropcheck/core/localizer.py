"""Localized remediation text for quality issues."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from cropcheck.models.quality import QualityIssueType

FALLBACK_SUGGESTION = "Please try again"
DEFAULT_LANGUAGE = "en"

# English, Kannada, Hindi, Tamil, Telugu
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "kn", "hi", "ta", "te")

SUGGESTIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        QualityIssueType.TOO_DARK.value: MappingProxyType(
            {
                "en": "Move to brighter lighting or use flash",
                "kn": "ಹೆಚ್ಚು ಬೆಳಕಿಗೆ ಹೋಗಿ ಅಥವಾ ಫ್ಲಾಶ್ ಬಳಸಿ",
                "hi": "तेज रोशनी में जाएं या फ्लैश का उपयोग करें",
                "ta": "பிரகாசமான வெளிச்சத்திற்கு செல்லவும் அல்லது ஃபிளாஷ் பயன்படுத்தவும்",
                "te": "ప్రకాశవంతమైన వెలుతురులో వెళ్ళండి లేదా ఫ్లాష్ ఉపయోగించండి",
            }
        ),
        QualityIssueType.TOO_BRIGHT.value: MappingProxyType(
            {
                "en": "Move away from direct sunlight",
                "kn": "ನೇರ ಸೂರ್ಯನ ಬೆಳಕಿನಿಂದ ದೂರ ಹೋಗಿ",
                "hi": "सीधी धूप से दूर हटें",
                "ta": "நேரடி சூரிய ஒளியிலிருந்து விலகி செல்லவும்",
                "te": "ప్రత్యక్ష సూర్యకాంతి నుండి దూరంగా వెళ్ళండి",
            }
        ),
        QualityIssueType.BLURRY.value: MappingProxyType(
            {
                "en": "Hold camera steady and tap to focus",
                "kn": "ಕ್ಯಾಮೆರಾವನ್ನು ಸ್ಥಿರವಾಗಿ ಹಿಡಿದು ಫೋಕಸ್ ಮಾಡಲು ಟ್ಯಾಪ್ ಮಾಡಿ",
                "hi": "कैमरा स्थिर रखें और फोकस करने के लिए टैप करें",
                "ta": "கேமராவை நிலையாக பிடித்து ஃபோகஸ் செய்ய டேப் செய்யவும்",
                "te": "కెమెరాను స్థిరంగా పట్టుకుని ఫోకస్ చేయడానికి ట్యాప్ చేయండి",
            }
        ),
        QualityIssueType.NO_PRODUCE.value: MappingProxyType(
            {
                "en": "Ensure produce fills most of the frame",
                "kn": "ಉತ್ಪನ್ನವು ಫ್ರೇಮ್‌ನ ಹೆಚ್ಚಿನ ಭಾಗವನ್ನು ತುಂಬಿರುವುದನ್ನು ಖಚಿತಪಡಿಸಿ",
                "hi": "सुनिश्चित करें कि उपज फ्रेम का अधिकांश हिस्सा भरे",
                "ta": "உற்பத்தி பெரும்பாலான பிரேமை நிரப்புவதை உறுதிசெய்யவும்",
                "te": "ఉత్పత్తి ఫ్రేమ్‌లో ఎక్కువ భాగం నింపుతుందని నిర్ధారించుకోండి",
            }
        ),
        QualityIssueType.LOW_RESOLUTION.value: MappingProxyType(
            {
                "en": "Move closer or use higher camera resolution",
                "kn": "ಹತ್ತಿರ ಹೋಗಿ ಅಥವಾ ಹೆಚ್ಚಿನ ಕ್ಯಾಮೆರಾ ರೆಸಲ್ಯೂಶನ್ ಬಳಸಿ",
                "hi": "करीब जाएं या उच्च कैमरा रिज़ॉल्यूशन का उपयोग करें",
                "ta": "அருகில் செல்லவும் அல்லது உயர் கேமரா தெளிவுத்திறனைப் பயன்படுத்தவும்",
                "te": "దగ్గరగా వెళ్ళండి లేదా అధిక కెమెరా రిజల్యూషన్ ఉపయోగించండి",
            }
        ),
    }
)


def suggest(issue_type: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up remediation text: exact language, then English, then a generic fallback."""
    if isinstance(issue_type, QualityIssueType):
        issue_type = issue_type.value
    by_language = SUGGESTIONS.get(issue_type)
    if not by_language:
        return FALLBACK_SUGGESTION
    return by_language.get(language) or by_language.get(DEFAULT_LANGUAGE) or FALLBACK_SUGGESTION
