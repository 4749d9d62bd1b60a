"""
Bundled default pool, used when neither the backend nor the local cache has content.
"""
from typing import List

from core.categories import category_image
from core.entities import ContentItem


_BUNDLED_ROWS = [
    ("sl-01", "I am worthy of love, success, and all the beautiful things life has to offer.", "Self-Love"),
    ("sl-02", "I am enough, just as I am. I do not need to prove my worth to anyone.", "Self-Love"),
    ("sl-03", "I honor my body, my mind, and my spirit with love and kindness.", "Self-Love"),
    ("sl-04", "I deserve all the good things that are coming my way.", "Self-Love"),
    ("sl-05", "I love and accept myself unconditionally, flaws and all.", "Self-Love"),
    ("sl-06", "My self-worth is not determined by others' opinions of me.", "Self-Love"),
    ("sl-07", "I am beautiful inside and out, and I celebrate my uniqueness.", "Self-Love"),
    ("sl-08", "I choose to speak to myself with compassion and understanding.", "Self-Love"),
    ("sl-09", "I am proud of how far I've come and excited about where I'm going.", "Self-Love"),
    ("sl-10", "I forgive myself for past mistakes and embrace my growth with open arms.", "Self-Love"),
    ("gr-01", "Today I choose joy, gratitude, and inner peace. I release all that no longer serves me.", "Gratitude"),
    ("gr-02", "I am grateful for the abundance that flows into my life every single day.", "Gratitude"),
    ("gr-03", "I appreciate the small moments that make life truly beautiful.", "Gratitude"),
    ("gr-04", "My heart overflows with thankfulness for every blessing in my life.", "Gratitude"),
    ("gr-05", "I am thankful for the lessons that challenges have taught me.", "Gratitude"),
    ("gr-06", "Gratitude transforms my perspective and opens doors to new possibilities.", "Gratitude"),
    ("gr-07", "I notice and celebrate the beauty in everyday moments.", "Gratitude"),
    ("gr-08", "I am grateful for the people who love and support me unconditionally.", "Gratitude"),
    ("gr-09", "Each breath I take is a gift, and I receive it with deep gratitude.", "Gratitude"),
    ("gr-10", "I choose to focus on what I have rather than what I lack.", "Gratitude"),
    ("co-01", "My potential is limitless. I trust the journey and embrace every step forward.", "Confidence"),
    ("co-02", "I have the power to create change and make a difference in the world.", "Confidence"),
    ("co-03", "I believe in my abilities and trust every decision I make.", "Confidence"),
    ("co-04", "I am bold, courageous, and capable of achieving anything I set my mind to.", "Confidence"),
    ("co-05", "My voice matters, and I speak my truth with confidence and grace.", "Confidence"),
    ("co-06", "I step outside my comfort zone because that is where growth happens.", "Confidence"),
    ("co-07", "I am a leader in my own life, making choices that align with my values.", "Confidence"),
    ("co-08", "I trust myself to handle whatever life brings my way.", "Confidence"),
    ("co-09", "I radiate confidence, and others are inspired by my authenticity.", "Confidence"),
    ("co-10", "Every day I become more confident in who I am and what I offer the world.", "Confidence"),
    ("ca-01", "I choose peace over worry. My mind is calm, and my heart is at ease.", "Calm"),
    ("ca-02", "I release tension from my body and invite stillness into my being.", "Calm"),
    ("ca-03", "I am at peace with what I cannot control and empowered by what I can.", "Calm"),
    ("ca-04", "My breath anchors me to the present moment, where all is well.", "Calm"),
    ("ca-05", "I give myself permission to slow down and simply be.", "Calm"),
    ("ca-06", "Tranquility flows through me like a gentle stream.", "Calm"),
    ("ca-07", "I let go of anxiety and welcome serenity into every moment.", "Calm"),
    ("ca-08", "My mind is a sanctuary of peace and positive thoughts.", "Calm"),
    ("ca-09", "I am safe, I am grounded, and I am at peace with this moment.", "Calm"),
    ("ca-10", "I choose calm over chaos and stillness over stress.", "Calm"),
    ("mo-01", "I am becoming the best version of myself, one day at a time.", "Motivation"),
    ("mo-02", "Every challenge is an opportunity to grow stronger and wiser.", "Motivation"),
    ("mo-03", "I have the discipline and determination to achieve my goals.", "Motivation"),
    ("mo-04", "Today I take one step closer to the life I dream of.", "Motivation"),
    ("mo-05", "I am unstoppable when I believe in my purpose.", "Motivation"),
    ("mo-06", "My setbacks are setups for even greater comebacks.", "Motivation"),
    ("mo-07", "I wake up each day with drive, passion, and purpose.", "Motivation"),
    ("mo-08", "I am committed to my growth and celebrate every small victory.", "Motivation"),
    ("mo-09", "The only limit to my success is the one I set for myself.", "Motivation"),
    ("mo-10", "I transform obstacles into stepping stones on the path to greatness.", "Motivation"),
    ("po-01", "I radiate positivity and attract wonderful things into my life.", "Positivity"),
    ("po-02", "I choose to see the good in every situation and every person I meet.", "Positivity"),
    ("po-03", "My positive energy creates a ripple effect that touches everyone around me.", "Positivity"),
    ("po-04", "I am a magnet for miracles, abundance, and good fortune.", "Positivity"),
    ("po-05", "Today is full of possibilities, and I embrace each one with an open heart.", "Positivity"),
    ("po-06", "I fill my mind with positive thoughts and my life with positive people.", "Positivity"),
    ("po-07", "Joy is my birthright, and I claim it fully today.", "Positivity"),
    ("po-08", "I see beauty and possibility where others see obstacles.", "Positivity"),
    ("po-09", "My smile lights up the world and makes every day a little brighter.", "Positivity"),
    ("po-10", "I choose happiness, and I create it in every single moment.", "Positivity"),
]


BUNDLED_POOL: List[ContentItem] = [
    ContentItem(id=item_id, text=text, category=category, image=category_image(category))
    for item_id, text, category in _BUNDLED_ROWS
]


def bundled_pool() -> List[ContentItem]:
    """A fresh copy of the bundled pool."""
    return list(BUNDLED_POOL)
