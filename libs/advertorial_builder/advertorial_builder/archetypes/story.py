"""Archétype « story » : récit long format, ton magazine, 3 sections numérotées."""
from .common import LONG_DISCLAIMER, inline_cta, numbered

_VERIFIED = "Verified Buyer"
_SWITCHED = "Verified Buyer · Switched from [Competitor]"

COPY = {
    "Pain": {
        "category": "FEATURE",
        "hook": [
            "You've tried everything. Spent the money, read the reviews, ordered the \"top-rated\" options — and <strong>still ended up disappointed</strong>.",
            "It's not your fault. Most products in this space are built on hype, not substance. They look great in ads but fall apart in real life.",
            "That's why when {product} started gaining real traction, people were skeptical. Another one? Really?",
            "But the results kept coming in. And they weren't just good — they were <strong>undeniable</strong>.",
        ],
        "benefits": [
            {"label": "THE PROBLEM", "headline": "You Were Never the Problem",
             "body": "Most products fail because they're designed for the masses, not for you. {product} was built differently — engineered to address the specific frustrations that other solutions ignore. No more settling for \"good enough.\"",
             "imgLabel": "Insert lifestyle image: frustrated customer with generic products",
             "imgHint": "Before photo or problem visualization — show the pain point"},
            {"label": "THE SOLUTION", "headline": "Why {product} Actually Works",
             "body": "{description_lead}What separates {product} from everything else? It starts with the fundamentals — quality materials, thoughtful design, and a relentless focus on real-world results rather than marketing claims.",
             "imgLabel": "Insert product hero shot or unboxing image",
             "imgHint": "Clean product photography — show quality and detail"},
            {"label": "THE RESULTS", "headline": "Real Results from Real People",
             "body": "Customers aren't just satisfied — they're genuinely surprised by the difference. When you use {product}, you feel it. And once you feel it, you understand why people don't go back.",
             "imgLabel": "Insert before/after or results graphic",
             "imgHint": "Transformation visual, results comparison, or customer photos"},
        ],
        "testimonials": [
            {"quote": "I was SO skeptical. I've been burned before. But {product} actually delivered. I'm genuinely impressed and have already told all my friends.",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "This replaced [X] products I was using before. Simpler, better results, and I'm actually saving money. Why didn't I switch sooner?",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "I never write reviews. But this deserved one. {product} is the real deal. If you're on the fence — just do it.",
             "name": "[Customer Name]", "detail": _VERIFIED},
        ],
        "stats": [
            {"value": "[X]%", "label": "of customers report noticeable improvement"},
            {"value": "[X]%", "label": "say it outperforms their previous solution"},
            {"value": "[X]%", "label": "would recommend to a friend"},
            {"value": "[X]x", "label": "better value vs. leading competitors"},
        ],
        "ctaHeadline": "Ready to Stop Settling?",
        "ctaSubtext":  "Join thousands who finally found a solution that works. Try it risk-free today.",
        "ctaButton":   "Try {product} Now",
    },
    "Desire": {
        "category": "FEATURE",
        "hook": [
            "Something is happening. Quietly, without much fanfare, <strong>thousands of people are transforming their daily experience</strong> — and they all point to the same thing.",
            "It's not a hack. It's not a trend. It's {product}.",
            "What started as a word-of-mouth recommendation has turned into a movement. And once you understand why, you'll see why people can't stop talking about it.",
            "Here's the story behind the product that's redefining what \"quality\" actually means.",
        ],
        "benefits": [
            {"label": "ELEVATE", "headline": "A New Standard for Your Daily Routine",
             "body": "Imagine starting each day knowing you have the best. Not the most expensive — the best. {product} was designed for people who refuse to compromise, who know the difference between marketing and genuine quality.",
             "imgLabel": "Insert aspirational lifestyle image",
             "imgHint": "Show the elevated lifestyle — premium, aspirational feel"},
            {"label": "TRANSFORM", "headline": "What Makes {product} Different",
             "body": "{description_lead}Every detail has been considered. From design to performance, {product} delivers an experience that compounds — it gets better the more you use it. That's not an accident. It's by design.",
             "imgLabel": "Insert product detail or feature breakdown graphic",
             "imgHint": "Highlight key features, ingredients, or craftsmanship details"},
            {"label": "THRIVE", "headline": "Join a Community That Gets It",
             "body": "When you choose {product}, you're joining a growing community of people who have raised their standards. People who share results, tips, and genuine enthusiasm — because the product earns it.",
             "imgLabel": "Insert community / social proof collage",
             "imgHint": "UGC grid, customer photos, or community moments"},
        ],
        "testimonials": [
            {"quote": "I didn't think a product could actually live up to the hype. {product} proved me wrong. It's genuinely elevated my routine.",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "The quality is unreal. You can feel the difference the first time you use it. I've told everyone I know.",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "I was paying more for worse results with my old solution. {product} is better AND more affordable. No-brainer.",
             "name": "[Customer Name]", "detail": _VERIFIED},
        ],
        "stats": [
            {"value": "[X]K+", "label": "happy customers and counting"},
            {"value": "[X]%", "label": "say it exceeded expectations"},
            {"value": "[X]%", "label": "repurchase within 60 days"},
            {"value": "#1", "label": "rated in its category"},
        ],
        "ctaHeadline": "Your Upgrade Is Waiting",
        "ctaSubtext":  "Experience what thousands already have. Start your transformation today.",
        "ctaButton":   "Get {product} Now",
    },
    "Comparison": {
        "category": "REVIEW",
        "hook": [
            "Let's be honest: you have options. Lots of them. And most of them will tell you they're \"the best.\"",
            "So how do you actually tell? <strong>You look at what real customers say after they've tried both sides.</strong>",
            "That's exactly what we did. We talked to people who switched to {product} from the leading alternatives — and the consensus was clear.",
            "Here's what the data (and the customers) reveal.",
        ],
        "benefits": [
            {"label": "QUALITY", "headline": "Superior Quality, No Compromises",
             "body": "While competitors cut corners to maximize margins, {product} invests where it matters. Every material, every feature, every detail — designed to deliver results you can actually feel. The difference isn't subtle.",
             "imgLabel": "Insert side-by-side comparison image",
             "imgHint": "Our product vs. competitor — visual quality comparison"},
            {"label": "VALUE", "headline": "Better Results at a Better Price",
             "body": "{description_lead}When you factor in performance, longevity, and actual results, {product} delivers significantly more value. Customers report spending less over time while getting better outcomes.",
             "imgLabel": "Insert value comparison or cost breakdown graphic",
             "imgHint": "Price/value comparison chart or savings visualization"},
            {"label": "TRUST", "headline": "Backed by Customers, Not Just Marketing",
             "body": "Anyone can run ads. Not everyone can earn genuine loyalty. {product} has built its reputation on real results from real people — and once you try it, you'll understand the difference between a marketed brand and an earned one.",
             "imgLabel": "Insert trust signals graphic",
             "imgHint": "Review screenshots, ratings badges, or press mentions"},
        ],
        "testimonials": [
            {"quote": "I was using [Competitor] for a year before switching. The difference was night and day. {product} is simply better.",
             "name": "[Customer Name]", "detail": _SWITCHED},
            {"quote": "Why did I wait so long? {product} outperforms my old solution at half the hassle. I feel like I was settling before.",
             "name": "[Customer Name]", "detail": _SWITCHED},
            {"quote": "After comparing everything on the market, {product} won in every category that mattered to me.",
             "name": "[Customer Name]", "detail": _VERIFIED},
        ],
        "stats": [
            {"value": "[X]%", "label": "of switchers say they'll never go back"},
            {"value": "[X]x", "label": "better value vs. leading competitor"},
            {"value": "[X]%", "label": "higher satisfaction rating"},
            {"value": "[X]%", "label": "recommend over alternatives"},
        ],
        "ctaHeadline": "See the Difference Yourself",
        "ctaSubtext":  "Join the thousands who compared — and chose us. Try it risk-free today.",
        "ctaButton":   "Try {product} Now",
    },
}

SKELETON = [
    # ── Above the fold ──
    {"type": "authorByline", "author": "[Author Name]", "role": "Contributing Writer", "date": "{date}",
     "category": "@category", "publicationName": "[Publication Name]"},
    {"type": "image", "label": "Insert hero image",
     "hint": "Product hero shot, lifestyle image, or brand visual — sets the tone for the entire page",
     "height": "340px"},
    {"type": "asSeenIn", "publications": ["VOGUE", "ELLE", "Forbes", "Health Magazine"]},

    # ── Hook ──
    {"type": "text", "content": "{@hook.0}<br><br>{@hook.1}<br><br>{@hook.2}<br><br>{@hook.3}"},
    {"type": "socialProof", "rating": "4.8", "reviewCount": "[X]K+", "customerCount": "[X]K+"},
    inline_cta("Discover {product} →"),

    # ── Bénéfices ──
    numbered(0, "benefits"),
    numbered(1, "benefits"),
    numbered(2, "benefits"),

    {"type": "offerBox", "headline": "Try {product} Today", "subtext": "See why thousands are making the switch.",
     "buttonText": "Check Availability", "discount": "[X]% OFF — Limited Time",
     "guarantee": "[X]-Day Money-Back Guarantee",
     "urgency": "Limited time offer — only available while supplies last"},
    {"type": "featureList", "heading": "Why {product} Stands Out", "icon": "✓", "items": [
        "Stays in place through a full day without readjusting",
        "Delivers visible, measurable results",
        "Replaces multiple products you're already buying",
        "Comfortable enough to forget you're using it",
        "Looks intentional, not purely functional",
        "Backed by [X]K+ verified customer reviews",
    ]},
    {"type": "comparison", "angles": ["Comparison"], "heading": "{product} vs. The Competition", "rows": [
        {"feature": "Quality",               "ours": "✓ Premium",               "theirs": "✗ Standard"},
        {"feature": "Effectiveness",         "ours": "✓ Clinically backed",     "theirs": "✗ Unverified"},
        {"feature": "Value for Money",       "ours": "✓ Better long-term",      "theirs": "✗ Hidden costs"},
        {"feature": "Customer Satisfaction", "ours": "✓ [X]% positive",         "theirs": "✗ Mixed reviews"},
        {"feature": "Transparency",          "ours": "✓ Full ingredient list",  "theirs": "✗ Proprietary blends"},
    ]},

    # ── Preuve ──
    {"type": "stats", "heading": "Real Customers, Real Results", "stats": "@stats"},
    {"type": "testimonials", "heading": "What Customers Are Saying", "testimonials": "@testimonials"},
    inline_cta("Shop {product} Now →"),
    {"type": "timeline", "heading": "What to Expect", "steps": [
        {"label": "Day 1",   "headline": "Immediate Impression", "body": "Notice the quality difference right away."},
        {"label": "Week 1",  "headline": "Building the Habit",   "body": "It becomes part of your routine — and you start seeing why."},
        {"label": "Month 1", "headline": "Real Results",         "body": "You'll wonder how you ever went without it."},
    ]},

    # ── Objections ──
    {"type": "faq", "heading": "Frequently Asked Questions", "items": [
        {"question": "How does {product} work?",
         "answer": "{product} is designed to [describe mechanism]. Simply [describe usage] and you'll begin to see results within [timeframe]."},
        {"question": "How long does it take to see results?",
         "answer": "Most customers report noticeable improvements within [X] days of consistent use. Full results typically appear within [X] weeks."},
        {"question": "Is there a money-back guarantee?",
         "answer": "Yes! We offer a full [X]-day money-back guarantee. If you're not completely satisfied, simply contact us for a full refund — no questions asked."},
        {"question": "How is this different from [competitor/alternative]?",
         "answer": "Unlike other solutions that [describe shortcoming], {product} [describe advantage]. That's why [X]% of customers who switch never go back."},
        {"question": "What are the ingredients / materials?",
         "answer": "{product} is made with [describe key ingredients/materials]. We're fully transparent about what goes into every product — no proprietary blends or hidden fillers."},
    ]},
    {"type": "comments", "heading": "Comments", "comments": [
        {"name": "[Customer Name]", "likes": "143", "timeAgo": "2 days ago",
         "text": "OK so I was super skeptical about {product} but WOW. I've been using it for 3 weeks now and the results are actually incredible. I used to struggle with [pain point] every single day and now it's completely different. Plus it's so easy to use — I actually look forward to it 😍"},
        {"name": "[Customer Name]", "likes": "28", "timeAgo": "1 day ago",
         "text": "Same!! The quality is what sold me honestly. I've tried so many alternatives that just didn't work."},
        {"name": "[Customer Name]", "likes": "87", "timeAgo": "5 hours ago",
         "text": "Been using {product} for about 2 months now and honestly it's the only solution I've ever stuck with. My [friend/partner] even noticed the difference. Worth every penny."},
        {"name": "[Customer Name]", "likes": "156", "timeAgo": "1 week ago",
         "text": "Just got my second order! I stopped buying [alternatives] because {product} has everything I need. Saves me so much money 🙌"},
        {"name": "[Customer Name]", "likes": "167", "timeAgo": "1 day ago",
         "text": "Switched from [Competitor] to {product} and honestly don't miss it at all. Saving money and getting better results. No more [pain point]!"},
    ]},

    # ── Offre finale ──
    {"type": "offerBox", "headline": "@ctaHeadline", "subtext": "@ctaSubtext", "buttonText": "@ctaButton",
     "discount": "[X]% OFF", "guarantee": "[X]-Day Money-Back Guarantee",
     "urgency": "Special offer — this discount ends soon"},
    {"type": "disclaimer", "text": LONG_DISCLAIMER},
]

ARCHETYPE = {
    "id":            "story",
    "name":          "Story",
    "description":   "Long-form magazine narrative: hook, three numbered benefits, proof, FAQ and comments.",
    "default_angle": "Pain",
    "titles": {
        "Pain":       "{title}: The Solution Thousands Were Waiting For",
        "Desire":     "How {title} Is Changing the Game",
        "Comparison": "{title} vs. The Rest: Why Customers Are Switching",
    },
    "copy":     COPY,
    "skeleton": SKELETON,
}
