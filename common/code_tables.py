import string

# 统一社会信用代码字符集（不含 I、O、S、V、Z）
CREDIT_CODE_CHARS = "0123456789ABCDEFGHJKLMNPQRTUWXY"
DIGITS = string.digits

# 信用代码前17位的权重
CREDIT_CODE_WEIGHTS = (1, 3, 9, 27, 19, 26, 16, 17, 20, 29, 25, 13, 8, 24, 10, 30, 28)
CREDIT_CODE_INDEX = {char: index for index, char in enumerate(CREDIT_CODE_CHARS)}
CREDIT_CODE_MODULUS = len(CREDIT_CODE_CHARS)

# 身份证前17位权重与校验码表（余数 0..10）
IDENTITY_WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
IDENTITY_CHECK_CODES = ('1', '0', 'X', '9', '8', '7', '6', '5', '4', '3', '2')
IDENTITY_MODULUS = 11

# 北京市东城区，仅作示例，不代表真实行政区划分配
DEFAULT_AREA_CODE = "110101"
BIRTH_YEAR_RANGE = (1900, 2024)

SURNAMES = (
    "赵", "钱", "孙", "李", "周", "吴", "郑", "王", "冯", "陈",
    "褚", "卫", "蒋", "沈", "韩", "杨", "朱", "秦", "尤", "许",
    "何", "吕", "施", "张", "孔", "曹", "严", "华", "金", "魏",
    "陶", "姜", "戚", "谢", "邹", "喻", "柏", "水", "窦", "章"
)

DOUBLE_SURNAMES = (
    "欧阳", "上官", "慕容", "司徒", "令狐", "诸葛", "南宫", "皇甫",
    "尉迟", "长孙", "段干", "百里", "东郭", "西门", "羊舌", "拓跋"
)

GIVEN_NAME_CHARS = (
    "伟", "芳", "娜", "敏", "静", "秀", "强", "磊", "洋", "勇",
    "艳", "杰", "娟", "涛", "明", "超", "琳", "佳", "雪", "峰",
    "丹", "平", "霞", "飞", "刚", "兰", "颖", "晶", "浩", "辉",
    "安", "宁", "阳", "天", "宇", "晨", "旭", "然", "哲", "轩"
)

PROVINCES = (
    "北京市", "上海市", "天津市", "重庆市",
    "河北省", "山西省", "辽宁省", "吉林省", "黑龙江省",
    "江苏省", "浙江省", "安徽省", "福建省", "江西省",
    "山东省", "河南省", "湖北省", "湖南省", "广东省",
    "海南省", "四川省", "贵州省", "云南省", "陕西省",
    "甘肃省", "青海省"
)

CITIES = {
    "北京市": ("北京市",),
    "上海市": ("上海市",),
    "天津市": ("天津市",),
    "重庆市": ("重庆市",),
    "河北省": ("石家庄市", "唐山市", "秦皇岛市"),
    "江苏省": ("南京市", "苏州市", "无锡市", "徐州市"),
    "广东省": ("广州市", "深圳市", "珠海市", "佛山市"),
    "浙江省": ("杭州市", "宁波市", "温州市"),
    "四川省": ("成都市", "绵阳市", "南充市"),
    "山东省": ("济南市", "青岛市", "烟台市"),
    "湖北省": ("武汉市", "宜昌市", "襄阳市"),
    "陕西省": ("西安市", "咸阳市", "宝鸡市")
}
UNKNOWN_CITIES = ("未知市",)

DISTRICTS = {
    "南京市": ("玄武区", "秦淮区", "建邺区", "鼓楼区"),
    "苏州市": ("姑苏区", "虎丘区", "吴中区", "相城区"),
    "广州市": ("天河区", "越秀区", "荔湾区", "海珠区"),
    "深圳市": ("福田区", "罗湖区", "南山区", "宝安区"),
    "杭州市": ("上城区", "下城区", "西湖区", "余杭区"),
    "成都市": ("锦江区", "青羊区", "金牛区", "武侯区")
}
DEFAULT_DISTRICTS = ("向阳区",)

STREETS = (
    "中山路", "解放路", "人民路", "建设路", "延安路",
    "长江路", "南京路", "花园路", "朝阳路", "洪武路",
    "天河北路", "珠江路", "科技大道", "和平街", "新华街"
)

HOUSE_NUMBER_SUFFIXES = ("号", "弄", "室", "栋", "单元")

COMPANY_LOCATIONS = (
    "北京", "上海", "广州", "深圳", "南京", "杭州", "成都", "武汉",
    "西安", "长沙", "厦门", "苏州", "天津", "重庆", "青岛"
)

COMPANY_INDUSTRIES = (
    "科技", "信息", "网络", "软件", "智能", "电子", "通信",
    "文化", "传媒", "广告", "设计", "商贸", "实业", "投资",
    "金融", "教育", "医疗", "健康", "环保", "能源", "物流"
)

COMPANY_MODIFIERS = (
    "创新", "时代", "未来", "智慧", "云", "星", "宏", "伟",
    "卓越", "远景", "前沿", "领航", "动力", "新", "天", "蓝海"
)

COMPANY_SUFFIXES = ("有限公司", "有限责任公司", "股份有限公司")
COMPLEX_COMPANY_SUFFIXES = ("控股集团", "科技集团", "投资控股", "发展有限公司")

# 中国大陆手机号段前三位
PHONE_PREFIXES = (
    '130', '131', '132', '133', '134', '135', '136', '137', '138', '139',
    '145', '147', '149',
    '150', '151', '152', '153', '155', '156', '157', '158', '159',
    '166', '167',
    '170', '171', '172', '173', '175', '176', '177', '178',
    '180', '181', '182', '183', '184', '185', '186', '187', '188', '189',
    '190', '191', '192', '193', '195', '196', '197', '198', '199'
)
