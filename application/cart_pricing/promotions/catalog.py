"""
Built-in campaign catalog.

Descriptors are applied in list order: identical-product bundle pricing
first, then the gift with purchase, tier rewards and finally the multi
product kits (kits skip items an earlier campaign already discounted).
"""

SHIRT_BUNDLE_PRODUCT_IDS = [
    3482611155046, 3482654834790, 3486863720550, 3486867751014, 4710060851302,
    4709959073894, 3949614039142, 4894272323686, 4722979438694, 4857921011814,
    4906969006182, 4858073481318, 4172918620262, 4326277447782, 4892588703846,
    4892588605542, 4892588671078, 4892588015718, 4809750282342, 4918130212966,
    5003487740006, 5003472175206, 5022566711398, 6538875764838, 4175116107878,
    6538867540070, 4918121496678, 6538877468774, 6538873569382, 4954139132006,
    4362213359718, 6575864348774, 6575872737382, 6575873917030, 6575876866150,
    6575879749734, 6578681741414, 6578663850086, 6642341838950, 6646293659750,
    6646710501478, 6660105207910, 6665245261926, 6702498611302, 6693880397926,
    6674043306086, 6677458452582, 6559236292710, 6713433096294, 6713438568550,
    6711233478758, 6724969234534, 6727270826086, 6701046333542, 6685991469158,
    6751441748070, 6738933186662, 6769425612902, 6777143984230, 6777148342374,
    6798136148070, 6804796375142, 6814706532454, 6818582167654, 6729854156902,
    6833256398950, 6842075250790, 4918116057190, 6846965481574, 6849378386022,
    6849243742310, 6851533078630, 6854560350310, 6851615391846, 6857988178022,
    6858015866982, 6858030514278, 6858029170790, 6857326002278, 6854802341990,
    6857203449958, 6857198010470, 6857196011622, 6857188966502, 6855604502630,
    6857321775206, 6855640809574, 6857322692710, 6858733256806, 6854796247142,
    6853299568742, 6855646609510, 6857323708518, 6857324658790, 6857240084582,
    6857209446502, 6855616594022, 6855638122598, 6857238216806, 6865356947558,
    6866447204454, 6866446844006, 6866443567206, 6868973224038, 6868968308838,
    6866555502694, 6874228097126, 6873424068710, 6873554419814, 6873555402854,
    6874400718950, 6875212054630, 6873603145830, 6873543442534, 6875731230822,
    6877594517606, 6877944021094, 6877562568806, 6885228052582, 6885231525990,
    6942467260518, 6942467457126, 6942467653734, 6942461263974, 6942467981414,
    6942468243558, 6727278035046, 6727268335718,
]


def _bogo(name, product_ids, property_key, discount_type, discount_amount, discount_message, paid_item_count):
    return {
        "campaign_type": "bogo",
        "name": name,
        "product_ids": product_ids,
        "property_key": property_key,
        "discount_type": discount_type,
        "discount_amount": discount_amount,
        "discount_message": discount_message,
        "paid_item_count": paid_item_count,
    }


def _kit(name, product_ids, discount_line_item_property, discount_message):
    return {
        "campaign_type": "bundle",
        "name": name,
        "bundle_items": [{"product_id": product_id, "quantity_needed": 1} for product_id in product_ids],
        "discount_line_item_property": discount_line_item_property,
        "discount_type": "percent",
        "discount_amount": 30,
        "discount_message": discount_message,
    }


BOGO_CAMPAIGNS = [
    _bogo("shirt_bundle", SHIRT_BUNDLE_PRODUCT_IDS, "Shirt Bundle", "percent", 10, "Bundle and Save", 3),
    _bogo("five_tanks_bundle", [6757518704742], "5 Tanks Bundle", "amount", "2.54", "Bundle 5 Tanks and Save", 5),
    _bogo(
        "five_items_save_7",
        [6814744805478, 6822201426022, 6822209585254, 6822207160422, 6843205091430],
        "5 items Bundle - Save $7.00", "amount", "7.00", "Bundle and Save", 5,
    ),
    _bogo(
        "five_items_save_8",
        [6846091395174, 6843193884774],
        "5 items Bundle - Save $8.00", "amount", "8.00", "Bundle and Save", 5,
    ),
    _bogo(
        "two_items_save_18",
        [6871675666534, 6924473172070, 6924473335910],
        "2 items Bundle - Save $18.00", "amount", "18.00", "Bundle and Save", 2,
    ),
    _bogo("two_items_save_12", [6868590133350], "2 items Bundle - Save $12.00", "amount", "12.00", "Bundle and Save", 2),
    _bogo("two_items_save_22_50", [6925722222694], "2 items Bundle - Save $22.50", "amount", "22.50", "Bundle and Save", 2),
    _bogo(
        "five_items_save_6",
        [6858876944486, 6814765711462, 6822199066726],
        "5 items Bundle - Save $6.00", "amount", "6.00", "Bundle and Save", 5,
    ),
    _bogo("five_items_save_5", [6858877960294], "5 items Bundle - Save $5.00", "amount", "5.00", "Bundle and Save", 5),
    _bogo("five_items_save_6_40", [6846092050534], "5 items Bundle - Save $6.40", "amount", "6.40", "Bundle and Save", 5),
]

SPEND_X_GET_Y_CAMPAIGNS = [
    {
        "campaign_type": "spend_x_get_y",
        "name": "gift_with_purchase_200",
        "product_selector_match_type": "include",
        "product_selector_type": "tag",
        "product_selectors": ["GWP-FREE"],
        "threshold": 200,
        "quantity_to_discount": 1,
        "discount_type": "percent",
        "discount_amount": 100,
        "discount_message": "Free with purchase of $200+",
        "coupon_prevent_message": "Discount codes cannot be combined with free item promotions.",
        "whitelisted_discount_code_match_type": "partial",
        "whitelisted_discount_code_part": ["PAIGE-"],
    },
]

TIER_REWARD_CAMPAIGNS = [
    {
        "campaign_type": "tier_reward",
        "name": "tier_reward",
        "quantity_to_discount": 1,
        "discount_type": "percent",
        "discount_amount": 100,
        "discount_message": "Free tier reward",
        "coupon_prevent_message": "Discount codes cannot be combined with free item promotions.",
    },
]

BUNDLE_CAMPAIGNS = [
    _kit("training_kit", [6791844593766, 6791840825446, 6791838007398], "Training-Kit", "BYLT For Training, get 30% off!"),
    _kit("workleisure_kit", [6850255323238, 6815879266406, 6799876685926], "Workleisure-Kit", "BYLT For Workleisure, get 30% off!"),
    _kit("golf_kit", [6799870099558, 6871552229478, 6799882354790], "Golf-Kit", "BYLT For Golf, get 30% off!"),
    _kit("office_kit", [6850242216038, 6815841288294, 6815848202342], "Office-Kit", "BYLT For The Office, get 30% off!"),
    _kit("everyday_kit", [6815865307238, 6840754339942, 6850272788582], "Everyday-Kit", "BYLT For Everyday, get 30% off!"),
]

DEFAULT_CAMPAIGNS = BOGO_CAMPAIGNS + SPEND_X_GET_Y_CAMPAIGNS + TIER_REWARD_CAMPAIGNS + BUNDLE_CAMPAIGNS
