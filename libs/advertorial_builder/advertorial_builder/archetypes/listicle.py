"""
Archétype « listicle » : raisons numérotées.
Pain / Comparison : 5 raisons, offre après la 2e. Desire : 6 raisons, offre après la 3e.
"""
from .common import LONG_DISCLAIMER, inline_cta, numbered

_VERIFIED = "Verified Buyer"
_SWITCHED = "Verified Buyer · Switched from [Competitor]"

COPY = {
    "Pain": {
        "role":     "Contributing Writer",
        "category": "HEALTH TIP",
        "intro": "If you've been let down by one too many products that didn't deliver — you're not alone. Here's why <strong>{product}</strong> is different, and why people who've tried everything else are calling it a game-changer.",
        "reasons": [
            {"headline": "It Was Built for the Problem You Actually Have",
             "body": "Most products are designed for the average person with the average problem. {product} was designed for people who've already tried the obvious solutions and need something that actually works.",
             "imgLabel": "Insert problem illustration",
             "imgHint": "Visual showing the common frustration or pain point"},
            {"headline": "The Results Speak for Themselves",
             "body": "We don't need to oversell it. Customer after customer reports the same thing: \"Why didn't I try this sooner?\" When the product works, the proof shows up in real life — not just marketing.",
             "imgLabel": "Insert results or before/after graphic",
             "imgHint": "Before/after, data visualization, or customer result photos"},
            {"headline": "No More Wasting Money on Half-Solutions",
             "body": "How much have you spent on products that ended up collecting dust? {product} is designed to replace multiple inferior solutions with one that actually delivers.",
             "imgLabel": "Insert value comparison graphic",
             "imgHint": "Cost comparison showing savings vs. alternatives"},
            {"headline": "Backed by a Community, Not Just a Company",
             "body": "Join [X]K+ customers who've made the switch. Real people sharing real results, tips, and honest reviews. When this many people agree — it's not marketing, it's momentum.",
             "imgLabel": "Insert social proof collage",
             "imgHint": "Customer review screenshots, UGC photos, or community highlights"},
            {"headline": "Risk-Free: Because We're That Confident",
             "body": "We stand behind {product} with a full [X]-day money-back guarantee. Try it, use it, test it. If it doesn't deliver — you get your money back. No fine print, no hassle.",
             "imgLabel": "Insert guarantee / trust badge graphic",
             "imgHint": "Money-back guarantee seal, trust badges, or secure checkout icons"},
        ],
        "testimonials": [
            {"quote": "After years of trying everything, I was ready to give up. {product} was genuinely the first thing that worked. I'm still shocked.",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "I've told my whole family about this. It's rare that something actually lives up to the hype — this exceeded it.",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "The quality is immediately obvious. You can tell this was made by people who care. 10/10.",
             "name": "[Customer Name]", "detail": _VERIFIED},
        ],
        "stats": [
            {"value": "[X]%", "label": "report noticeable improvement"},
            {"value": "[X]%", "label": "replaced a more expensive solution"},
            {"value": "[X]%", "label": "would recommend to a friend"},
        ],
        "ctaHeadline": "Stop Wasting Money on Things That Don't Work",
        "ctaSubtext":  "Try {product} risk-free today and finally experience the difference.",
        "ctaButton":   "Get {product} Now",
    },
    "Desire": {
        "role":     "Contributing Writer",
        "category": "TRENDING NOW",
        "intro": "There's a reason <strong>{product}</strong> keeps showing up in your feed. It's not just hype — it's what happens when a product actually delivers on its promises. Here's why people can't stop talking about it.",
        "reasons": [
            {"headline": "It Makes Your Daily Routine Actually Enjoyable",
             "body": "The best products aren't just effective — they're a joy to use. {product} was designed to feel like an upgrade every single time. No chores, no compromises.",
             "imgLabel": "Insert lifestyle / routine image",
             "imgHint": "Aspirational daily routine photo — premium feel"},
            {"headline": "The Quality Is Immediately Obvious",
             "body": "From the moment you unbox it, you can feel the difference. Every detail — from materials to design to performance — was crafted for people who know the difference between \"fine\" and \"exceptional.\"",
             "imgLabel": "Insert premium product detail shot",
             "imgHint": "Close-up product photography showing quality and craftsmanship"},
            {"headline": "People Can't Stop Recommending It",
             "body": "Our highest-converting channel? Word of mouth. When [X]% of customers actively recommend something to friends, that says more than any ad campaign ever could.",
             "imgLabel": "Insert customer review screenshots",
             "imgHint": "Grid of real customer reviews and ratings"},
            {"headline": "It Replaces Multiple Products You're Already Buying",
             "body": "{description_lead}Why use three mediocre solutions when one great one does the job? {product} simplifies your life while delivering better results.",
             "imgLabel": "Insert product comparison graphic",
             "imgHint": "Visual showing how one product replaces many"},
            {"headline": "It Keeps Getting Better",
             "body": "We don't launch and forget. {product} is continuously refined based on customer feedback, new research, and our obsession with making the best product in its category.",
             "imgLabel": "Insert innovation graphic",
             "imgHint": "Product evolution, new features, or improvement timeline"},
            {"headline": "It's an Investment That Pays for Itself",
             "body": "When you factor in the quality, longevity, and results — {product} doesn't cost more. It saves you money. Customers report spending less overall after making the switch.",
             "imgLabel": "Insert savings visualization",
             "imgHint": "Cost savings comparison chart or value breakdown"},
        ],
        "testimonials": [
            {"quote": "I don't get obsessed with products easily. But {product}? Obsessed. It's genuinely transformed my routine.",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "The hype is real. I was skeptical, bought it anyway, and now I understand. This is the real deal.",
             "name": "[Customer Name]", "detail": _VERIFIED},
            {"quote": "If you're reading reviews trying to decide — just get it. I wish I hadn't waited as long as I did.",
             "name": "[Customer Name]", "detail": _VERIFIED},
        ],
        "stats": [
            {"value": "[X]K+", "label": "happy customers worldwide"},
            {"value": "[X]%", "label": "repurchase rate"},
            {"value": "[X]%", "label": "say it exceeded expectations"},
        ],
        "ctaHeadline": "Ready to See What the Hype Is About?",
        "ctaSubtext":  "Join [X]K+ customers who upgraded to {product}. Your future self will thank you.",
        "ctaButton":   "Shop {product} Now",
    },
    "Comparison": {
        "role":     "Product Reviewer",
        "category": "HONEST REVIEW",
        "intro": "You've seen the ads from every brand claiming to be \"#1.\" So we did the work for you. Here's an <strong>honest, side-by-side comparison</strong> of {product} vs. the most popular alternatives — and why customers keep choosing us.",
        "reasons": [
            {"headline": "Premium Ingredients / Materials (Where Others Cut Corners)",
             "body": "We publish exactly what goes into {product} — no proprietary blends, no hidden fillers. Compare that to competitors who hide behind vague labels. When you see what's inside, the choice is obvious.",
             "imgLabel": "Insert ingredient/material comparison",
             "imgHint": "Side-by-side ingredient list or materials breakdown vs. competitor"},
            {"headline": "Honest Pricing (No Tricks, No Markup Games)",
             "body": "Some competitors charge 2-3x for the same (or worse) results. {product} delivers premium quality at a price that makes sense. No inflated \"retail prices\" and fake discounts.",
             "imgLabel": "Insert price comparison chart",
             "imgHint": "Price per unit/serving comparison table showing value"},
            {"headline": "Real Customer Reviews (Not Cherry-Picked)",
             "body": "We don't hide our 1-star reviews. We learn from them. That transparency is why our average rating is [X] stars across [X]K+ reviews — earned, not manufactured.",
             "imgLabel": "Insert review distribution graphic",
             "imgHint": "Review histogram or authentic review screenshots"},
            {"headline": "Better Customer Experience (Before and After Purchase)",
             "body": "Fast shipping, responsive support, and a no-questions-asked return policy. Many competitors make returns a nightmare. We make them effortless.",
             "imgLabel": "Insert customer experience comparison",
             "imgHint": "Service comparison: shipping times, support quality, return policy"},
            {"headline": "Results That Actually Hold Up Over Time",
             "body": "Quick fixes fade. {product} is built for sustained results. Our customers don't just like us at first — they become more loyal over time.",
             "imgLabel": "Insert retention data graphic",
             "imgHint": "Customer retention chart, long-term results data, or timeline"},
        ],
        "testimonials": [
            {"quote": "I compared everything on the market. Price, quality, reviews — {product} won in every category. Not even close.",
             "name": "[Customer Name]", "detail": _SWITCHED},
            {"quote": "Was using [Competitor] for years. Made the switch and honestly can't believe the difference. {product} is leagues ahead.",
             "name": "[Customer Name]", "detail": _SWITCHED},
            {"quote": "The transparency alone won me over. Every ingredient listed, real reviews shown, honest pricing. Refreshing.",
             "name": "[Customer Name]", "detail": _VERIFIED},
        ],
        "stats": [
            {"value": "[X]%", "label": "of switchers never go back"},
            {"value": "[X]x", "label": "better value per dollar"},
            {"value": "[X]★", "label": "average rating across all reviews"},
        ],
        "ctaHeadline": "The Comparison Is Clear",
        "ctaSubtext":  "Try {product} risk-free and see why customers switch — and stay.",
        "ctaButton":   "Try {product} Now",
    },
}


def _reason(index: int, angles=None) -> dict:
    slot = numbered(index, "reasons", label=f"REASON {index + 1}")
    if angles:
        slot["angles"] = angles
    return slot


def _mid_offer(angles) -> dict:
    return {
        "type": "offerBox", "angles": angles,
        "headline": "Special Offer for {product}",
        "subtext": "Get started with [X]% OFF today! This discount ends soon. Over [X]K+ reviews. Stock is running low.",
        "buttonText": "Claim Your Discount", "discount": "[X]% OFF",
        "guarantee": "[X]-Day Money-Back Guarantee",
        "urgency": "Limited time offer — only available while supplies last",
    }


SKELETON = [
    {"type": "authorByline", "author": "[Author Name]", "role": "@role", "date": "{date}",
     "category": "@category", "publicationName": "[Publication Name]"},
    {"type": "image", "label": "Insert hero image",
     "hint": "Product hero shot or lifestyle banner — make it thumb-stopping for ads", "height": "340px"},
    {"type": "asSeenIn", "publications": ["Forbes", "Health Magazine", "Glamour", "The New York Times"]},
    {"type": "text", "content": "@intro"},
    {"type": "socialProof", "rating": "4.8", "reviewCount": "[X]K+", "customerCount": "[X]K+"},
    inline_cta("Discover {product} →"),

    # ── Raisons (offre au milieu de la liste) ──
    _reason(0),
    _reason(1),
    _mid_offer(["Pain", "Comparison"]),
    _reason(2),
    _mid_offer(["Desire"]),
    _reason(3),
    _reason(4),
    _reason(5, angles=["Desire"]),

    {"type": "comparison", "angles": ["Comparison"], "heading": "{product} vs. The Competition", "rows": [
        {"feature": "Quality / Ingredients", "ours": "✓ Transparent & premium", "theirs": "✗ Hidden / proprietary"},
        {"feature": "Price Fairness",        "ours": "✓ Honest pricing",        "theirs": "✗ Inflated MSRP"},
        {"feature": "Customer Reviews",      "ours": "✓ [X]★ ([X]K+ reviews)",  "theirs": "✗ Limited / filtered"},
        {"feature": "Money-Back Guarantee",  "ours": "✓ [X] days, no hassle",   "theirs": "✗ Strict / unclear"},
        {"feature": "Customer Support",      "ours": "✓ Fast, human support",   "theirs": "✗ Slow / outsourced"},
    ]},
    {"type": "stats", "heading": "The Numbers Don't Lie", "stats": "@stats"},
    {"type": "testimonials", "heading": "Hear It from Real Customers", "testimonials": "@testimonials"},
    {"type": "prosCons",
     "pros": [
         "Delivers real, noticeable results",
         "Premium quality at a fair price",
         "Replaces multiple products you're already buying",
         "Backed by [X]K+ genuine customer reviews",
         "[X]-day money-back guarantee",
         "Fast & free shipping",
     ],
     "cons": ["Best pricing only available on the official {product} website"]},
    inline_cta("Shop {product} Now →"),
    {"type": "faq", "heading": "Frequently Asked Questions", "items": [
        {"question": "How does {product} work?",
         "answer": "{product} is designed to [describe mechanism]. Simply [describe usage] and you'll begin to see results within [timeframe]."},
        {"question": "How long does it take to see results?",
         "answer": "Most customers report noticeable improvements within [X] days. Full results typically appear within [X] weeks."},
        {"question": "Is there a money-back guarantee?",
         "answer": "Yes! We offer a full [X]-day money-back guarantee. If you're not satisfied, contact us for a full refund — no questions asked."},
        {"question": "How is {product} different from alternatives?",
         "answer": "Unlike other options that [describe shortcoming], {product} [describe advantage]. That's why [X]% of customers who switch never go back."},
    ]},
    {"type": "comments", "heading": "Comments", "comments": [
        {"name": "[Customer Name]", "likes": "143", "timeAgo": "2 days ago",
         "text": "Ok so I was super skeptical about {product} but WOW. I've been using it for 3 weeks now and the results are actually insane. I used to struggle with [pain point] every day and now I'm completely different. Plus it's so easy — I actually look forward to it 😍"},
        {"name": "[Customer Name]", "likes": "28", "timeAgo": "1 day ago",
         "text": "Same!! The quality is what sold me honestly. I've tried so many alternatives that just didn't work."},
        {"name": "[Customer Name]", "likes": "87", "timeAgo": "5 hours ago",
         "text": "Been using {product} for about 2 months now and it's the only solution I've ever stuck with consistently. My friends even noticed the difference lol. Worth every penny."},
        {"name": "[Customer Name]", "likes": "167", "timeAgo": "1 day ago",
         "text": "Switched from [Competitor] to {product} and honestly don't miss it at all. Saving money too and getting basically the same or better results. Game changer!"},
        {"name": "[Customer Name]", "likes": "156", "timeAgo": "1 week ago",
         "text": "Just got my second order delivered! I stopped buying [alternatives] because {product} has everything I need. Saves me so much money and hassle 🙌"},
    ]},
    {"type": "offerBox", "headline": "@ctaHeadline", "subtext": "@ctaSubtext", "buttonText": "@ctaButton",
     "discount": "[X]% OFF", "guarantee": "[X]-Day Money-Back Guarantee",
     "urgency": "Special offer — this discount ends soon"},
    {"type": "disclaimer", "text": LONG_DISCLAIMER},
]

ARCHETYPE = {
    "id":            "listicle",
    "name":          "Listicle",
    "description":   "Numbered reasons with a mid-list offer, proof, pros/cons, FAQ and comments.",
    "default_angle": "Pain",
    "titles": {
        "Pain":       "5 Reasons {title} Is the Fix You've Been Looking For",
        "Desire":     "6 Reasons Everyone's Obsessed with {title}",
        "Comparison": "{title} vs. The Competition: An Honest Breakdown",
    },
    "copy":     COPY,
    "skeleton": SKELETON,
}
