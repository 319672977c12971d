"""Centralized prompt templates used by the content services."""

MEDIA_OFFICER_PROMPT = (
    "You are the Media Officer for {club_name} (Nicknamed: {nickname}).\n"
    "Tone: {tone}\n\n"
    "Squad Context:\n{squad}\n\n"
    "Rules:\n"
    "- Keep it punchy and engaging.\n"
    '- No robotic AI phrases like "Here is a tweet".\n'
    "- Use emojis sparingly but effectively.\n"
    "- If a player is mentioned in the prompt, refer to them by name or nickname."
)

MATCH_DETAILS_TEMPLATE = (
    "Opponent: {opponent}\n"
    "Venue: {venue}\n"
    "Kickoff: {kickoff}\n"
    "Competition: {competition}\n"
    "Stakes: {stakes}"
)

PREVIEW_TASK = (
    "Task: Write a 200-word match preview.\n"
    "Match: {match}\n"
    "Context: Hype up the game. Mention our captain {captain} leading the lines.\n"
    "Call to Action: Get the fans down to the ground."
)

REPORT_TASK = (
    "Task: Write a 250-word match report.\n"
    "Match: {match}\n"
    "Result: {result} ({ours}-{theirs})\n"
    "Notes: {notes}\n"
    "Man of the Match: {motm}\n"
    "Game Vibe: {vibe}\n"
    'Manager Quote: "{quote}"\n'
    "{scorers}\n"
    "{stats}\n"
    "Narrative: Focus on the result, individual performances, and use the stats to back up the story "
    '(e.g. if we had low possession but won, call it a "smash and grab" or "defensive masterclass").'
)

SOCIAL_TASK = (
    "Task: Write 3 distinct social media posts (Twitter/X style) for this game.\n"
    "1. Pre-match hype.\n"
    "2. Line-up announcement teaser.\n"
    "3. {third}.\n\n"
    "Match: {match}"
)

GRAPHIC_COPY_TASK = (
    "Task: Provide 3 short, punchy lines of text to be placed on a graphic image designed by a human designer.\n"
    "Context: {stakes}\n"
    "Match: {match}\n\n"
    "Output format:\n"
    '1. Main Headline (e.g. "DERBY DAY", "CLASH OF TITANS")\n'
    '2. Sub-headline (e.g. "It all comes down to this.")\n'
    '3. Footer detail (e.g. "KO 15:00 | THE CITADEL")'
)

REWRITE_PROMPT = (
    "Role: Senior Editor.\n"
    'Task: Rewrite the following content based on this instruction: "{instruction}".\n\n'
    'Original Content:\n"{original}"\n\n'
    "Constraints:\n"
    "- Maintain the club's tone: {tone}.\n"
    "- Keep the factual details (dates, names, scores) accurate.\n"
    "- Return ONLY the rewritten text."
)

SUGGEST_SCORERS_PROMPT = (
    "Role: Football Analyst.\n"
    "Context: The match ended. We scored {goals} goals against {opponent}.\n"
    'Notes provided by admin: "{notes}".\n\n'
    "Squad:\n{squad}\n\n"
    "Task:\n"
    "1. If specific scorers are mentioned in the notes (even by nickname or part of name), "
    "extract their full names from the squad list.\n"
    "2. If NOT mentioned, predict the most likely scorers based on the number of goals ({goals}) "
    "and player form/position.\n"
    "3. Do not suggest more players than goals scored.\n\n"
    "Output: A JSON array containing ONLY the names of the players from the squad list who scored.\n"
    'Example: ["Marcus Thorn", "Billy Bones"]'
)

MATCHDAY_STYLES = {
    "hype": "bold, dynamic, high-energy with dramatic lighting, motion blur effects, and intense colors",
    "minimal": "clean, modern, minimalist design with lots of white space, simple typography",
    "retro": "vintage football poster style, textured paper effect, classic typography, muted warm colors",
    "neon": "cyberpunk aesthetic, neon glow effects, dark background with bright cyan and magenta accents, futuristic",
}

MATCHDAY_GRAPHIC_PROMPT = (
    "Create a professional matchday announcement graphic for a football club.\n\n"
    "CLUB: {club_name} ({nickname})\n"
    "OPPONENT: {opponent}\n"
    "VENUE: {venue}\n"
    "DATE: {date}\n"
    "KICKOFF: {time}\n"
    "COMPETITION: {competition}\n\n"
    "DESIGN STYLE: {style}\n\n"
    "PRIMARY COLOR: {primary}\n"
    "SECONDARY COLOR: {secondary}\n\n"
    "Requirements:\n"
    "- Include both team names prominently\n"
    "- Show date and kickoff time clearly\n"
    '- Add "MATCHDAY" or similar header text\n'
    "- Make it suitable for social media (Instagram/Twitter)\n"
    "- Professional sports graphic quality\n"
    "- NO real player faces or photos\n"
    "- Use abstract football imagery, geometric shapes, or silhouettes"
)

RESULT_MOODS = {
    "WIN": "celebratory, triumphant",
    "DRAW": "neutral, balanced",
    "LOSS": "determined, resilient",
}

RESULT_GRAPHIC_PROMPT = (
    "Create a professional full-time result graphic for a football match.\n\n"
    "CLUB: {club_name}\n"
    "OPPONENT: {opponent}\n"
    "FINAL SCORE: {club_name} {ours} - {theirs} {opponent}\n"
    "RESULT: {result}\n"
    "{extras}"
    "COMPETITION: {competition}\n\n"
    "DESIGN STYLE: Cyberpunk/neon aesthetic with {mood} mood.\n\n"
    "PRIMARY COLOR: {primary}\n"
    "SECONDARY COLOR: {secondary}\n\n"
    "Requirements:\n"
    "- Large, bold score display\n"
    '- "FULL TIME" or "FT" header\n'
    "- {celebration}\n"
    "- Suitable for social media sharing\n"
    "- NO real player faces - use silhouettes or abstract shapes"
)

PLAYER_SPOTLIGHT_PROMPT = (
    "Create a professional player spotlight/stats card graphic.\n\n"
    "CLUB: {club_name}\n"
    "PLAYER: {name}\n"
    "POSITION: {position}\n"
    "NUMBER: #{number}\n"
    "{captain}"
    "STATS (0-99 scale):\n"
    "- Pace: {pace}\n"
    "- Shooting: {shooting}\n"
    "- Passing: {passing}\n"
    "- Dribbling: {dribbling}\n"
    "- Defending: {defending}\n"
    "- Physical: {physical}\n\n"
    "FORM: {form}/10\n\n"
    "DESIGN STYLE: Modern sports card aesthetic, cyberpunk/neon elements, dark background with glowing accents.\n\n"
    "PRIMARY COLOR: {primary}\n"
    "SECONDARY COLOR: {secondary}\n\n"
    "Requirements:\n"
    "- Player silhouette or abstract representation (NO real face)\n"
    "- Hexagonal or radar-style stats visualization\n"
    "- Player name and number prominently displayed\n"
    "- Club branding incorporated\n"
    "- Trading card / FIFA-style layout"
)

ANNOUNCEMENT_STYLES = {
    "signing": 'exciting reveal style, dramatic lighting, "WELCOME" or "SIGNED" header',
    "news": "clean news bulletin style, professional journalism aesthetic",
    "event": "invitation/promotional style, festive or exciting mood",
    "achievement": "trophy/celebration style, golden accents, triumphant mood",
}

ANNOUNCEMENT_PROMPT = (
    "Create a professional announcement graphic for a football club.\n\n"
    "CLUB: {club_name}\n"
    "HEADLINE: {title}\n"
    "SUBTEXT: {subtitle}\n"
    "TYPE: {kind}\n\n"
    "DESIGN STYLE: {style}. Cyberpunk/modern aesthetic with neon accents.\n\n"
    "PRIMARY COLOR: {primary}\n"
    "SECONDARY COLOR: {secondary}\n\n"
    "Requirements:\n"
    "- Bold, attention-grabbing headline\n"
    "- Club branding visible\n"
    "- Suitable for social media (square or 16:9)\n"
    "- Professional sports media quality\n"
    "- NO real photographs - use abstract/geometric design"
)

CUSTOM_IMAGE_PROMPT = (
    "Create a professional graphic for football club: {club_name} ({nickname})\n\n"
    "USER REQUEST: {request}\n\n"
    "CLUB BRAND GUIDELINES:\n"
    "- Primary Color: {primary}\n"
    "- Secondary Color: {secondary}\n"
    "- Tone: {tone}\n\n"
    "Requirements:\n"
    "- Incorporate club colors\n"
    "- Professional sports media quality\n"
    "- Suitable for social media\n"
    "- NO real player faces - use silhouettes or abstract representations{reference}"
)

REFERENCE_IMAGE_NOTE = (
    "\n\nREFERENCE IMAGE PROVIDED: Use the attached image as style/layout reference. "
    "Match its visual style, composition, or color scheme as specified in the user request."
)
